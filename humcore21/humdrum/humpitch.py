# ------------------------------------------------------------------------------
# Name:          HumPitch.py
# Purpose:       Diatonic/chromatic/octave pitch representation, with
#                **kern and scientific pitch spelling conversions.
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import sys
import re
import typing as t

from music21 import environment

from humcore21.humdrum import HumPitchFormatError

environLocal = environment.Environment('humcore21.humdrum.humpitch')

# For debug or unit test print, a simple way to get a string which is the current function name
# with a colon appended.
# for current func name, specify 0 or no argument.
# for name of caller of current func, specify 1.
# for name of caller of caller of current func, specify 2. etc.
# pylint: disable=protected-access
funcName = lambda n=0: sys._getframe(n + 1).f_code.co_name + ':'  # pragma no cover
# pylint: enable=protected-access

# diatonic pitch classes
DPC_REST: int = -1
DPC_C: int = 0
DPC_D: int = 1
DPC_E: int = 2
DPC_F: int = 3
DPC_G: int = 4
DPC_A: int = 5
DPC_B: int = 6

# returned by the interval parsers when they can't make sense of their input
INVALID_INTERVAL_CLASS: int = -123456789

DIATONIC_PC_TO_LETTER_LC: t.Tuple[str, ...] = ('c', 'd', 'e', 'f', 'g', 'a', 'b')
DIATONIC_PC_TO_LETTER_UC: t.Tuple[str, ...] = ('C', 'D', 'E', 'F', 'G', 'A', 'B')

# same-letter runs only ('cc', 'DDD'); mixed letters or case are not a pitch
KERN_PITCH_SEARCH: str = (
    r'(A+|B+|C+|D+|E+|F+|G+|a+|b+|c+|d+|e+|f+|g+)(-+|#+)?'
)
SCIENTIFIC_PITCH_SEARCH: str = r'([A-Ga-g])(b+|#+)?(-?\d+)'


class HumPitch:
    '''
        A notated pitch: diatonic pitch class (0..6 for C..B, negative for a rest),
        chromatic alteration (+1 per sharp, -1 per flat, any size), and octave
        (4 is the octave starting on middle C).

        HumPitch is a value type: copy it before handing it to something that
        might change it.  HumTransposer.transpose() returns a new HumPitch;
        HumTransposer.transposeInPlace() changes the one you pass in.

    >>> p = HumPitch(DPC_E, -1, 5)
    >>> p.toKernSpelling()
    'ee-'
    >>> p.toScientificSpelling()
    'Eb5'
    '''
    def __init__(self, diatonicPC: int = DPC_REST, accid: int = 0, octave: int = 0) -> None:
        self._diatonicPC: int = diatonicPC
        self._accid: int = accid
        self._octave: int = octave

    '''
    //////////////////////////////
    //
    // HumPitch::getDiatonicPC -- Return the diatonic pitch class of the pitch.
    //     0 = C, 1 = D, ..., 6 = B.  Negative values mean a rest.
    // HumPitch::setDiatonicPC -- no validation (any int can be stored).
    '''
    @property
    def diatonicPC(self) -> int:
        return self._diatonicPC

    @diatonicPC.setter
    def diatonicPC(self, newDiatonicPC: int) -> None:
        self._diatonicPC = newDiatonicPC

    '''
    //////////////////////////////
    //
    // HumPitch::getAccid -- Return the chromatic alteration of the pitch.
    //     0 = natural, +1 = sharp, -2 = double flat, etc.
    '''
    @property
    def accid(self) -> int:
        return self._accid

    @accid.setter
    def accid(self, newAccid: int) -> None:
        self._accid = newAccid

    '''
    //////////////////////////////
    //
    // HumPitch::getOctave -- Return the octave number of the pitch.
    //     4 = octave starting on middle C.
    '''
    @property
    def octave(self) -> int:
        return self._octave

    @octave.setter
    def octave(self, newOctave: int) -> None:
        self._octave = newOctave

    def setPitch(self, diatonicPC: int, accid: int, octave: int) -> None:
        self._diatonicPC = diatonicPC
        self._accid = accid
        self._octave = octave

    def makeRest(self) -> None:
        self._diatonicPC = DPC_REST
        self._accid = 0
        self._octave = 0

    @property
    def isRest(self) -> bool:
        return self._diatonicPC < 0

    def makeSharp(self) -> None:
        self._accid = 1

    def makeFlat(self) -> None:
        self._accid = -1

    def makeNatural(self) -> None:
        self._accid = 0

    '''
    //////////////////////////////
    //
    // HumPitch::isValid -- Returns true if the absolute value of the accidental
    //     is less than or equal to the max accidental value.
    '''
    def isValid(self, maxAccid: int) -> bool:
        return abs(self._accid) <= abs(maxAccid)

    # value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HumPitch):
            return NotImplemented
        return (
            self._diatonicPC == other._diatonicPC
            and self._accid == other._accid
            and self._octave == other._octave
        )

    def __hash__(self) -> int:
        return hash((self._diatonicPC, self._accid, self._octave))

    def __repr__(self) -> str:
        return (f'HumPitch(diatonicPC={self._diatonicPC}, '
                + f'accid={self._accid}, octave={self._octave})')

    def __str__(self) -> str:
        return self.toScientificSpelling()

    def copy(self) -> 'HumPitch':
        return HumPitch(self._diatonicPC, self._accid, self._octave)

    '''
    //////////////////////////////
    //
    // HumPitch::getKernPitch -- Return the pitch as a **kern pitch name.
    //     Octaves below 4 are uppercase (C3 = 'C', C2 = 'CC'), octaves 4 and
    //     above are lowercase (C4 = 'c', C5 = 'cc').  Rests are 'r'.
    '''
    def toKernSpelling(self) -> str:
        if self.isRest:
            return 'r'

        output: str
        if self._octave < 4:
            count: int = 4 - self._octave
            output = DIATONIC_PC_TO_LETTER_UC[self._diatonicPC] * count
        else:
            count = self._octave - 3
            output = DIATONIC_PC_TO_LETTER_LC[self._diatonicPC] * count

        if self._accid < 0:
            output += '-' * -self._accid
        elif self._accid > 0:
            output += '#' * self._accid

        return output

    '''
    //////////////////////////////
    //
    // HumPitch::setKernPitch -- Set the pitch from a **kern pitch name.
    //     Returns false if no pitch could be found (the pitch is left as a rest).
    //     Any 'r' in the string means a rest (and returns true).
    '''
    def fromKernSpelling(self, kern: str) -> bool:
        self.makeRest()
        if 'r' in kern:
            # rests can have pitches (for vertical placement), but we don't care
            return True

        m = re.search(KERN_PITCH_SEARCH, kern)
        if m is None:
            environLocal.printDebug(f'{funcName()} no kern pitch in "{kern}"')
            return False

        letters: str = m.group(1)
        accidentals: t.Optional[str] = m.group(2)

        letter: str = letters[0]
        count: int = len(letters)
        if letter.islower():
            self._octave = 3 + count
        else:
            self._octave = 4 - count

        self._diatonicPC = (ord(letter.lower()) - ord('a') + 5) % 7

        if accidentals:
            if accidentals[0] == '#':
                self._accid = len(accidentals)
            else:
                self._accid = -len(accidentals)

        return True

    '''
    //////////////////////////////
    //
    // HumPitch::getScientificPitch -- Returns the pitch in scientific pitch
    //     notation: letter (always uppercase), 'b' or '#' repeated for the
    //     accidentals, and octave number (e.g. 'C4', 'Eb5', 'F##-1').  Rests are 'R'.
    '''
    def toScientificSpelling(self) -> str:
        if self.isRest:
            return 'R'

        output: str = DIATONIC_PC_TO_LETTER_UC[self._diatonicPC]
        if self._accid < 0:
            output += 'b' * -self._accid
        elif self._accid > 0:
            output += '#' * self._accid

        output += str(self._octave)
        return output

    '''
    //////////////////////////////
    //
    // HumPitch::setScientificPitch -- Set the pitch from scientific pitch
    //     notation (see above).  Letter case is ignored, octave can be negative.
    //     Returns false (and leaves a rest) if no pitch is found.
    '''
    def fromScientificSpelling(self, text: str) -> bool:
        self.makeRest()

        m = re.search(SCIENTIFIC_PITCH_SEARCH, text)
        if m is None:
            environLocal.printDebug(f'{funcName()} no scientific pitch in "{text}"')
            return False

        letter: str = m.group(1).upper()
        accidentals: t.Optional[str] = m.group(2)
        octaveStr: str = m.group(3)

        self._diatonicPC = (ord(letter) - ord('A') + 5) % 7
        self._octave = int(octaveStr)
        if accidentals:
            if accidentals[0] == 'b':
                self._accid = -len(accidentals)
            else:
                self._accid = len(accidentals)

        return True

    '''
        fromKern and fromScientific are factories for clients that want
        a parse failure to be an error instead of a quiet rest.
        Note that a kern rest ('4r') is a successful parse.
    '''
    @classmethod
    def fromKern(cls, kern: str) -> 'HumPitch':
        output = cls()
        if not output.fromKernSpelling(kern):
            raise HumPitchFormatError(f'cannot parse kern pitch from "{kern}"')
        return output

    @classmethod
    def fromScientific(cls, text: str) -> 'HumPitch':
        output = cls()
        if not output.fromScientificSpelling(text):
            raise HumPitchFormatError(f'cannot parse scientific pitch from "{text}"')
        return output
