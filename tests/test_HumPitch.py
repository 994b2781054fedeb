import pytest

# The things we're testing
from humcore21.humdrum import HumPitch
from humcore21.humdrum import HumPitchFormatError
from humcore21.humdrum import *

# test utilities
from tests.Utilities import *

def test_HumPitch_default_init():
    pitch = HumPitch()
    assert pitch.isRest
    assert pitch.diatonicPC == DPC_REST
    assert pitch.accid == 0
    assert pitch.octave == 0
    assert pitch.toKernSpelling() == 'r'
    assert pitch.toScientificSpelling() == 'R'

def test_HumPitch_to_spellings():
    CheckHumPitch(HumPitch(DPC_C, 0, 4), DPC_C, 0, 4, 'c', 'C4')
    CheckHumPitch(HumPitch(DPC_C, 0, 5), DPC_C, 0, 5, 'cc', 'C5')
    CheckHumPitch(HumPitch(DPC_C, 0, 3), DPC_C, 0, 3, 'C', 'C3')
    CheckHumPitch(HumPitch(DPC_C, 0, 2), DPC_C, 0, 2, 'CC', 'C2')
    CheckHumPitch(HumPitch(DPC_F, 1, 4), DPC_F, 1, 4, 'f#', 'F#4')
    CheckHumPitch(HumPitch(DPC_E, -1, 5), DPC_E, -1, 5, 'ee-', 'Eb5')
    CheckHumPitch(HumPitch(DPC_B, -2, 3), DPC_B, -2, 3, 'B--', 'Bbb3')
    CheckHumPitch(HumPitch(DPC_G, 3, 6), DPC_G, 3, 6, 'ggg###', 'G###6')
    CheckHumPitch(HumPitch(DPC_A, 0, 0), DPC_A, 0, 0, 'AAAA', 'A0')
    CheckHumPitch(HumPitch(DPC_D, 1, -1), DPC_D, 1, -1, 'DDDDD#', 'D#-1')

def test_HumPitch_from_kern():
    pitch = HumPitch()
    assert pitch.fromKernSpelling('c')
    CheckHumPitch(pitch, DPC_C, 0, 4)

    # everything around the pitch is ignored
    assert pitch.fromKernSpelling('(8.cc##L')
    CheckHumPitch(pitch, DPC_C, 2, 5)

    assert pitch.fromKernSpelling('4.AAA#')
    CheckHumPitch(pitch, DPC_A, 1, 1)

    assert pitch.fromKernSpelling('[2B-')
    CheckHumPitch(pitch, DPC_B, -1, 3)

    assert pitch.fromKernSpelling('16ddd--]')
    CheckHumPitch(pitch, DPC_D, -2, 6)

    # a rest is a successful parse, even with a vertical position
    assert pitch.fromKernSpelling('4ryy')
    assert pitch.isRest
    assert pitch.fromKernSpelling('4ccr')
    assert pitch.isRest

    # no pitch at all
    pitch = HumPitch(DPC_G, 0, 4)
    assert not pitch.fromKernSpelling('.')
    assert pitch.isRest
    assert not pitch.fromKernSpelling('4')
    assert pitch.isRest

def test_HumPitch_from_scientific():
    pitch = HumPitch()
    assert pitch.fromScientificSpelling('C4')
    CheckHumPitch(pitch, DPC_C, 0, 4, 'c')

    assert pitch.fromScientificSpelling('Eb5')
    CheckHumPitch(pitch, DPC_E, -1, 5, 'ee-')

    # lower case letter works too
    assert pitch.fromScientificSpelling('bb3')
    CheckHumPitch(pitch, DPC_B, -1, 3, 'B-')

    assert pitch.fromScientificSpelling('F##2')
    CheckHumPitch(pitch, DPC_F, 2, 2, 'FF##')

    assert pitch.fromScientificSpelling('C#-1')
    CheckHumPitch(pitch, DPC_C, 1, -1)

    assert not pitch.fromScientificSpelling('C')
    assert pitch.isRest
    assert not pitch.fromScientificSpelling('X4')
    assert pitch.isRest

def test_HumPitch_factories():
    CheckHumPitch(HumPitch.fromKern('4ee-'), DPC_E, -1, 5)
    CheckHumPitch(HumPitch.fromScientific('G#3'), DPC_G, 1, 3)
    assert HumPitch.fromKern('4r').isRest

    with pytest.raises(HumPitchFormatError):
        HumPitch.fromKern('.')

    with pytest.raises(HumPitchFormatError):
        HumPitch.fromScientific('H4')

    # HumPitchFormatError is a ValueError
    with pytest.raises(ValueError):
        HumPitch.fromScientific('')

def test_HumPitch_accidental_helpers():
    pitch = HumPitch(DPC_D, 0, 4)
    pitch.makeSharp()
    assert pitch.accid == 1
    pitch.makeFlat()
    assert pitch.accid == -1
    pitch.makeNatural()
    assert pitch.accid == 0

    pitch.accid = 3
    assert pitch.isValid(3)
    assert not pitch.isValid(2)
    assert pitch.isValid(-3)

    pitch.makeRest()
    assert pitch.isRest
    assert pitch.toKernSpelling() == 'r'

def test_HumPitch_value_semantics():
    p1 = HumPitch(DPC_E, -1, 5)
    p2 = HumPitch(DPC_E, -1, 5)
    assert p1 == p2
    assert hash(p1) == hash(p2)
    assert p1 != HumPitch(DPC_D, 1, 5)
    assert p1 != 'Eb5'
    assert len({p1, p2}) == 1

    p3 = p1.copy()
    assert p3 == p1
    assert p3 is not p1
    p3.octave = 2
    assert p1.octave == 5

    assert str(p1) == 'Eb5'
    assert repr(p1) == 'HumPitch(diatonicPC=2, accid=-1, octave=5)'

def test_HumPitch_setters():
    pitch = HumPitch()
    pitch.setPitch(DPC_A, -1, 2)
    CheckHumPitch(pitch, DPC_A, -1, 2, 'AA-', 'Ab2')

    pitch.diatonicPC = DPC_G
    pitch.octave = 4
    pitch.accid = 0
    CheckHumPitch(pitch, DPC_G, 0, 4, 'g', 'G4')

def test_HumPitch_kern_round_trip():
    # base-40 and base-600 alteration limits
    for maxAccid in (2, 42):
        for dpc in range(7):
            for accid in range(-maxAccid, maxAccid + 1):
                for octave in range(-5, 13):
                    pitch = HumPitch(dpc, accid, octave)
                    assert pitch.isValid(maxAccid)
                    newPitch = HumPitch()
                    assert newPitch.fromKernSpelling(pitch.toKernSpelling())
                    assert newPitch == pitch

def test_HumPitch_scientific_keeps_letter_and_accidentals():
    # humlib's HumPitch::getScientificPitch overwrites its letter+accidental
    # prefix with the octave number, so Eb4 comes back as just "4".  We
    # return the whole spelling.
    assert HumPitch(DPC_E, -1, 4).toScientificSpelling() == 'Eb4'
    assert HumPitch(DPC_C, 0, 4).toScientificSpelling() != '4'
    assert HumPitch.fromScientific(HumPitch(DPC_G, 2, -1).toScientificSpelling()) == HumPitch(DPC_G, 2, -1)
