# ------------------------------------------------------------------------------
# Name:          M21Convert.py
# Purpose:       Conversion between HumPitch (etc) and music21 objects
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

#    All methods are static.  M21Convert is just a namespace for these conversion functions and
#    look-up tables.

import typing as t

import music21 as m21

from humcore21.shared import SharedConstants
from humcore21.humdrum import HumdrumExportError
from humcore21.humdrum import HumPitchFormatError
from humcore21.humdrum import HumPitch
from humcore21.humdrum import HumdrumToken


class M21Convert:
    m21StepToDiatonicPC: t.Dict[str, int] = {
        'C': 0,
        'D': 1,
        'E': 2,
        'F': 3,
        'G': 4,
        'A': 5,
        'B': 6,
    }

    '''
        m21PitchFromHumPitch returns a music21 Pitch with the same step, alteration
        and octave.  A rest has no music21 Pitch, so returns None.  Raises
        HumdrumExportError if the alteration is beyond quadruple sharp/flat,
        which music21 can't represent.
    '''
    @staticmethod
    def m21PitchFromHumPitch(humPitch: HumPitch) -> t.Optional[m21.pitch.Pitch]:
        if humPitch.isRest:
            return None

        if abs(humPitch.accid) > SharedConstants._MAX_M21_ALTER:
            raise HumdrumExportError(
                f'music21 cannot represent an alteration of {humPitch.accid} ({humPitch})'
            )

        m21Pitch: m21.pitch.Pitch = m21.pitch.Pitch(
            step=SharedConstants._DIATONIC_PC_TO_M21_STEP[humPitch.diatonicPC],
            octave=humPitch.octave
        )
        if humPitch.accid != 0:
            # music21 modifier strings are the same as kern accidentals ('##', '---', etc)
            modifier: str = '#' * humPitch.accid if humPitch.accid > 0 else '-' * -humPitch.accid
            m21Pitch.accidental = m21.pitch.Accidental(modifier)

        return m21Pitch

    '''
        humPitchFromM21Pitch: the inverse of m21PitchFromHumPitch.  A pitch with
        no octave gets music21's implicit octave (4, most likely).  Microtonal
        alterations (e.g. half-sharp) raise HumPitchFormatError.
    '''
    @staticmethod
    def humPitchFromM21Pitch(m21Pitch: m21.pitch.Pitch) -> HumPitch:
        m21Octave: t.Optional[int] = m21Pitch.octave
        if m21Octave is None:
            m21Octave = m21Pitch.implicitOctave

        alter: float = 0.
        if m21Pitch.accidental is not None:
            alter = m21Pitch.accidental.alter

        if alter != int(alter):
            raise HumPitchFormatError(
                f'microtonal alteration ({alter}) is not supported: {m21Pitch.nameWithOctave}'
            )

        return HumPitch(
            M21Convert.m21StepToDiatonicPC[m21Pitch.step],
            int(alter),
            m21Octave
        )

    @staticmethod
    def kernPitchFromM21Pitch(m21Pitch: m21.pitch.Pitch) -> str:
        return M21Convert.humPitchFromM21Pitch(m21Pitch).toKernSpelling()

    '''
        m21PitchesFromToken returns a music21 Pitch for each pitched subtoken of
        a **kern data token (chords have more than one).  Rests and null tokens
        have no pitches.
    '''
    @staticmethod
    def m21PitchesFromToken(token: HumdrumToken) -> t.List[m21.pitch.Pitch]:
        output: t.List[m21.pitch.Pitch] = []
        for humPitch in token.kernPitches:
            m21Pitch: t.Optional[m21.pitch.Pitch] = M21Convert.m21PitchFromHumPitch(humPitch)
            if m21Pitch is not None:
                output.append(m21Pitch)
        return output
