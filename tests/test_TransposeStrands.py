import pytest

# The things we're testing
from humcore21.humdrum import HumdrumFile
from humcore21.humdrum import HumTransposer
from humcore21.humdrum import *

# test utilities
from tests.Utilities import *

SPLIT_TIE_FILE = (
    '**kern\t**kern\n'
    + '*^\t*\n'
    + '4c\t4e\t4g\n'
    + '.\t[4f#\t.\n'
    + '4r\t4f#]\t4b-\n'
    + '*v\t*v\t*\n'
    + '4cc 4ee\t4AA\n'
    + '*-\t*-'
)

SPLIT_TIE_FILE_UP_M2 = (
    '**kern\t**kern\n'
    + '*^\t*\n'
    + '4d\t4f#\t4a\n'
    + '.\t[4g#\t.\n'
    + '4r\t4g#]\t4cc\n'
    + '*v\t*v\t*\n'
    + '4dd 4ff#\t4BB\n'
    + '*-\t*-'
)

def test_transposeKern_simple():
    hf = HumdrumFile()
    hf.readString('**kern\n4c\n4e\n4g\n*-\n')
    assert hf.isValid

    transposer = HumTransposer()
    assert transposer.setTransposition('+M2')
    assert hf.transposeKern(transposer) == 3
    assert str(hf) == '**kern\n4d\n4f#\n4a\n*-'

def test_transposeKern_split_and_tie():
    hf = HumdrumFile()
    hf.readString(SPLIT_TIE_FILE)
    assert hf.isValid

    transposer = HumTransposer()
    assert transposer.setTransposition('+M2')

    # every pitch is transposed exactly once, tied continuations included
    assert hf.transposeKern(transposer) == 9
    assert str(hf) == SPLIT_TIE_FILE_UP_M2

    # the rest kept its place
    assert tokenAt(hf, 4, 0).text == '4r'
    assert tokenAt(hf, 4, 0).isRest

    # transposing back gets us where we started
    assert transposer.setTransposition('-M2')
    assert hf.transposeKern(transposer) == 9
    assert str(hf) == SPLIT_TIE_FILE

def test_transposeKern_base40():
    hf = HumdrumFile()
    hf.readString('**kern\n4B-\n4cc#\n*-')

    transposer = HumTransposer()
    transposer.setBase40()
    assert transposer.setTransposition('-m3')
    assert hf.transposeKern(transposer) == 2
    assert str(hf) == '**kern\n4G\n4a#\n*-'

def test_transposeKern_skips_other_spines():
    hf = HumdrumFile()
    hf.readString('**kern\t**text\n4c\tcee\n4d\tdee\n*-\t*-')
    assert hf.isValid

    transposer = HumTransposer()
    assert transposer.setTransposition('P5')
    assert hf.transposeKern(transposer) == 2
    assert str(hf) == '**kern\t**text\n4g\tcee\n4a\tdee\n*-\t*-'

def test_kernNoteAttacks():
    hf = HumdrumFile()
    hf.readString(SPLIT_TIE_FILE)
    assert hf.isValid

    attacks = [token.text for token in hf.kernNoteAttacks()]
    # no rests, no nulls, no tie continuations
    assert sorted(attacks) == sorted(['4c', '4e', '[4f#', '4g', '4b-', '4cc 4ee', '4AA'])

def test_kernStrands():
    hf = HumdrumFile()
    hf.readString('**kern\t**text\n4c\tcee\n*-\t*-')
    assert hf.isValid

    kernStrands = list(hf.kernStrands())
    assert len(kernStrands) == 1
    CheckString(kernStrands[0].first.text, '**kern')
    CheckString(kernStrands[0].last.text, '*-')
    assert len(list(hf.strands())) == 2
