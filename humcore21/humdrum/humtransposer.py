# ------------------------------------------------------------------------------
# Name:          HumTransposer.py
# Purpose:       Integer-based pitch transposition and interval naming,
#                with a configurable maximum chromatic alteration.
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

from humcore21.humdrum import HumIntervalFormatError
from humcore21.humdrum.humpitch import HumPitch
from humcore21.humdrum.humpitch import DPC_C, DPC_D, DPC_E, DPC_F, DPC_G, DPC_A, DPC_B
from humcore21.humdrum.humpitch import INVALID_INTERVAL_CLASS

environLocal = environment.Environment('humcore21.humdrum.humtransposer')

# For debug or unit test print, a simple way to get a string which is the current function name
# with a colon appended.
# for current func name, specify 0 or no argument.
# for name of caller of current func, specify 1.
# for name of caller of caller of current func, specify 2. etc.
# pylint: disable=protected-access
funcName = lambda n=0: sys._getframe(n + 1).f_code.co_name + ':'  # pragma no cover
# pylint: enable=protected-access

# semitones above C of each natural diatonic pitch class
DIATONIC_TO_SEMITONE: t.Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# diatonic interval numbers (0-based) that take P/A/d, the rest take M/m/A/d
PERFECT_INTERVAL_INDICES: t.Tuple[int, ...] = (0, 3, 4)

INTERVAL_NAME_PATTERN: str = r'([+-]?)([Pp]|M|m|[Aa]+|[Dd]+)(\d+)'
VALID_INTERVAL_NAME_PATTERN: str = r'(-|\+?)([Pp]|M|m|[aA]+|[dD]+)([1-9][0-9]*)'
VALID_SEMITONES_PATTERN: str = r'(-|\+?)(\d+)'
KEY_TONIC_PATTERN: str = r'([+]*|[-]*)([A-Ga-g])([Ss#]*|[Ffb]*)'


class KeyChange(t.NamedTuple):
    # transpose from fromPitch to the tonic
    # named by toKeyTonic (e.g. 'G', '+Bb', '--e')
    fromPitch: HumPitch
    toKeyTonic: str


class KeyFifthsSemitones(t.NamedTuple):
    # keyFifths is used to pick the spelling of the semitone interval
    keyFifths: int
    semitones: t.Union[int, str]


class DiatonicChromatic(t.NamedTuple):
    diatonic: int
    chromatic: int


TranspositionSpec = t.Union[int, str, KeyChange, KeyFifthsSemitones, DiatonicChromatic]


class HumTransposer:
    '''
        HumTransposer converts pitches to integers (in a "base" system with
        room for maxAccid sharps and flats on every natural note), adds an
        interval (also an integer in that base), and converts back.

        Base 40 (maxAccid = 2) is the classic system: double sharps and double
        flats only.  The default is base 600 (maxAccid = 42), which can handle
        any transposition you are likely to run into.

        Changing the base (setMaxAccid, setBase40, setBase600) resets the stored
        transposition to a unison, since interval integers from the old base
        are meaningless in the new one.
    '''
    BASE40_MAX_ACCID: int = 2
    BASE600_MAX_ACCID: int = 42
    DEFAULT_MAX_ACCID: int = BASE600_MAX_ACCID

    def __init__(self, maxAccid: int = DEFAULT_MAX_ACCID) -> None:
        self._base: int = 0
        self._maxAccid: int = 0
        self._transpose: int = 0
        self._diatonicMapping: t.List[int] = [0] * 7
        self.setMaxAccid(maxAccid)

    '''
    //////////////////////////////
    //
    // HumTransposer::setMaxAccid -- Calculate variables related to a specific base system.
    //     The base is 7 natural notes, each with maxAccid sharps and flats,
    //     plus 5 extra slots (one between each whole-step pair).
    '''
    def setMaxAccid(self, maxAccid: int) -> None:
        self._maxAccid = abs(maxAccid)
        self._base = 7 * (2 * self._maxAccid + 1) + 5
        self._calculateDiatonicMapping()
        # interval integers from any previous base are meaningless now
        self._transpose = 0

    @property
    def maxAccid(self) -> int:
        return self._maxAccid

    @maxAccid.setter
    def maxAccid(self, newMaxAccid: int) -> None:
        self.setMaxAccid(newMaxAccid)

    @property
    def base(self) -> int:
        return self._base

    def setBase40(self) -> None:
        self.setMaxAccid(self.BASE40_MAX_ACCID)

    def setBase600(self) -> None:
        self.setMaxAccid(self.BASE600_MAX_ACCID)

    '''
    //////////////////////////////
    //
    // HumTransposer::calculateDiatonicMapping -- Calculate the integer values for the
    //    natural pitch classes.
    '''
    def _calculateDiatonicMapping(self) -> None:
        wholeTone: int = self._maxAccid * 2 + 2
        halfTone: int = self._maxAccid * 2 + 1
        mapping: t.List[int] = [0] * 7
        mapping[DPC_C] = self._maxAccid
        mapping[DPC_D] = mapping[DPC_C] + wholeTone
        mapping[DPC_E] = mapping[DPC_D] + wholeTone
        mapping[DPC_F] = mapping[DPC_E] + halfTone
        mapping[DPC_G] = mapping[DPC_F] + wholeTone
        mapping[DPC_A] = mapping[DPC_G] + wholeTone
        mapping[DPC_B] = mapping[DPC_A] + wholeTone
        self._diatonicMapping = mapping

    '''
        Natural pitch class integers (octave 0) in the current base.
    '''
    def getCPitchClass(self) -> int:
        return self._diatonicMapping[DPC_C]

    def getDPitchClass(self) -> int:
        return self._diatonicMapping[DPC_D]

    def getEPitchClass(self) -> int:
        return self._diatonicMapping[DPC_E]

    def getFPitchClass(self) -> int:
        return self._diatonicMapping[DPC_F]

    def getGPitchClass(self) -> int:
        return self._diatonicMapping[DPC_G]

    def getAPitchClass(self) -> int:
        return self._diatonicMapping[DPC_A]

    def getBPitchClass(self) -> int:
        return self._diatonicMapping[DPC_B]

    '''
    //////////////////////////////
    //
    // HumTransposer::perfectUnisonClass -- Return the integer interval class
    //     for a perfect unison (and so on for the other simple intervals).
    //     Augmented and diminished intervals are one more or one less than
    //     these.
    '''
    def perfectUnisonClass(self) -> int:
        return 0

    def minorSecondClass(self) -> int:
        return self._diatonicMapping[DPC_F] - self._diatonicMapping[DPC_E]

    def majorSecondClass(self) -> int:
        return self._diatonicMapping[DPC_D] - self._diatonicMapping[DPC_C]

    def minorThirdClass(self) -> int:
        return self._diatonicMapping[DPC_F] - self._diatonicMapping[DPC_D]

    def majorThirdClass(self) -> int:
        return self._diatonicMapping[DPC_E] - self._diatonicMapping[DPC_C]

    def perfectFourthClass(self) -> int:
        return self._diatonicMapping[DPC_F] - self._diatonicMapping[DPC_C]

    def perfectFifthClass(self) -> int:
        return self._diatonicMapping[DPC_G] - self._diatonicMapping[DPC_C]

    def minorSixthClass(self) -> int:
        return self._diatonicMapping[DPC_A] - self._diatonicMapping[DPC_C] - 1

    def majorSixthClass(self) -> int:
        return self._diatonicMapping[DPC_A] - self._diatonicMapping[DPC_C]

    def minorSeventhClass(self) -> int:
        return self._diatonicMapping[DPC_B] - self._diatonicMapping[DPC_C] - 1

    def majorSeventhClass(self) -> int:
        return self._diatonicMapping[DPC_B] - self._diatonicMapping[DPC_C]

    def perfectOctaveClass(self) -> int:
        return self._base

    '''
    //////////////////////////////
    //
    // HumTransposer::humHumPitchToIntegerPitch -- Convert a pitch into an
    //     integer in the current base.
    '''
    def pitchToInt(self, pitch: HumPitch) -> int:
        return (
            pitch.octave * self._base
            + self._diatonicMapping[pitch.diatonicPC]
            + pitch.accid
        )

    '''
    //////////////////////////////
    //
    // HumTransposer::integerPitchToHumPitch -- Convert an integer within the current base
    //    into a pitch (octave/diatonic pitch class/chromatic alteration).
    //    We use floor division, so negative octaves work. --gregc
    //    Nearest natural wins; on a tie the lower pitch class wins.
    '''
    def intToPitch(self, ipitch: int) -> HumPitch:
        octave, chroma = divmod(ipitch, self._base)
        minDiff: int = chroma - self._diatonicMapping[0]
        minIdx: int = 0
        for i in range(1, 7):
            diff: int = chroma - self._diatonicMapping[i]
            if abs(diff) < abs(minDiff):
                minDiff = diff
                minIdx = i
        return HumPitch(minIdx, minDiff, octave)

    '''
    //////////////////////////////
    //
    // HumTransposer::setTransposition -- Set the transposition value which is an
    //   interval class in the current base system.  The argument can be any of:
    //      int: an interval class (e.g. perfectFifthClass())
    //      str: an interval name (e.g. '-P5', 'M6', '+d7')
    //      KeyChange: transpose from a pitch to a key tonic (e.g. 'Eb' -> '+B-')
    //      KeyFifthsSemitones: semitones, spelled appropriately for a key
    //      DiatonicChromatic: diatonic steps and chromatic semitones
    //   Returns False (and leaves the transposition unchanged) if the
    //   argument can't be interpreted.
    '''
    def setTransposition(self, spec: TranspositionSpec) -> bool:
        newTranspose: int = INVALID_INTERVAL_CLASS

        # check for bool first: it's an int, but never an interval
        if isinstance(spec, bool):
            environLocal.printDebug(f'{funcName()} bool is not a transposition: {spec}')
            return False

        if isinstance(spec, int):
            newTranspose = spec
        elif isinstance(spec, str):
            newTranspose = self.getInterval(spec)
        elif isinstance(spec, KeyChange):
            newTranspose = self._keyChangeToIntervalClass(spec.fromPitch, spec.toKeyTonic)
        elif isinstance(spec, KeyFifthsSemitones):
            semitones: t.Union[int, str] = spec.semitones
            if isinstance(semitones, str):
                if not self.isValidSemitones(semitones):
                    environLocal.printDebug(
                        f'{funcName()} invalid semitones: "{semitones}"'
                    )
                    return False
                semitones = int(semitones)
            newTranspose = self.semitonesToIntervalClass(spec.keyFifths, semitones)
        elif isinstance(spec, DiatonicChromatic):
            newTranspose = self.diatonicChromaticToIntervalClass(
                spec.diatonic, spec.chromatic
            )
        else:
            environLocal.printDebug(f'{funcName()} unknown transposition: {spec!r}')
            return False

        if newTranspose == INVALID_INTERVAL_CLASS:
            return False

        self._transpose = newTranspose
        return True

    def setTranspositionDC(self, diatonic: int, chromatic: int) -> bool:
        return self.setTransposition(DiatonicChromatic(diatonic, chromatic))

    def setTranspositionByKeyChange(self, fromPitch: HumPitch, toKeyTonic: str) -> bool:
        return self.setTransposition(KeyChange(fromPitch, toKeyTonic))

    def setTranspositionBySemitones(self, keyFifths: int, semitones: t.Union[int, str]) -> bool:
        return self.setTransposition(KeyFifthsSemitones(keyFifths, semitones))

    '''
        _keyChangeToIntervalClass -- The octave of toKeyTonic is the number of '+'
        (or minus the number of '-') signs.  A transposition with n signs should
        never be more than n octaves away, and one with no signs should never be
        more than half an octave away.
    '''
    def _keyChangeToIntervalClass(self, fromPitch: HumPitch, toKeyTonic: str) -> int:
        toPitch, success = self.getKeyTonic(toKeyTonic)
        if not success:
            return INVALID_INTERVAL_CLASS

        numSigns: int = toPitch.octave
        transpose: int = self.getIntervalBetween(fromPitch, toPitch)
        octave: int = self.perfectOctaveClass()

        if numSigns > 0 and transpose > octave * numSigns:
            transpose -= octave
        elif numSigns < 0 and transpose < octave * numSigns:
            transpose += octave
        elif numSigns == 0 and transpose > octave // 2:
            transpose -= octave
        elif numSigns == 0 and transpose < -(octave // 2):
            transpose += octave

        return transpose

    @property
    def transpositionIntervalClass(self) -> int:
        return self._transpose

    @property
    def transpositionIntervalName(self) -> str:
        return self.getIntervalName(self._transpose)

    '''
    //////////////////////////////
    //
    // HumTransposer::transpose -- Transpose a pitch by the stored transposition,
    //   or by the given interval (integer class or name).  Returns a new pitch,
    //   the pitch passed in is not changed.  Rests come back as rests.
    '''
    def transpose(
            self,
            pitch: HumPitch,
            interval: t.Optional[t.Union[int, str]] = None
    ) -> HumPitch:
        output: HumPitch = pitch.copy()
        self.transposeInPlace(output, interval)
        return output

    def transposeInPlace(
            self,
            pitch: HumPitch,
            interval: t.Optional[t.Union[int, str]] = None
    ) -> None:
        transpose: int = self._resolveInterval(interval)
        if pitch.isRest:
            return

        newPitch: HumPitch = self.intToPitch(self.pitchToInt(pitch) + transpose)
        pitch.setPitch(newPitch.diatonicPC, newPitch.accid, newPitch.octave)

    '''
    //////////////////////////////
    //
    // HumTransposer::transpose -- Transpose an integer pitch by the stored
    //     transposition.
    '''
    def transposeIntegerPitch(self, ipitch: int) -> int:
        return ipitch + self._transpose

    def _resolveInterval(self, interval: t.Optional[t.Union[int, str]]) -> int:
        if interval is None:
            return self._transpose
        if isinstance(interval, str):
            return self.parseInterval(interval)
        return interval

    '''
        parseInterval is getInterval for clients that want an error instead of
        a sentinel value.
    '''
    def parseInterval(self, intervalName: str) -> int:
        output: int = self.getInterval(intervalName)
        if output == INVALID_INTERVAL_CLASS:
            raise HumIntervalFormatError(f'invalid interval name: "{intervalName}"')
        return output

    '''
    //////////////////////////////
    //
    // HumTransposer::getInterval -- Convert a diatonic interval with chromatic
    //    quality and direction into an integer interval class.   Input string
    //    is in the format: direction + quality + diatonic interval.
    //    Such as +M2 for up a major second, -P5 is down a perfect fifth.
    //    Regular expression that the string should conform to:
    //           (-|[+]?)([Pp]|M|m|[aA]+|[dD]+)([1-9][0-9]*)
    //    P and p are perfect, a and A augmented, d and D diminished.
    //    M and m are major and minor.  A perfect quality can only be used
    //    with unisons, fourths, fifths (and their octave compounds), major
    //    and minor only with seconds, thirds, sixths and sevenths.
    //    Returns INVALID_INTERVAL_CLASS if the name can't be parsed.
    '''
    def getInterval(self, intervalName: str) -> int:
        m = re.fullmatch(INTERVAL_NAME_PATTERN, intervalName)
        if m is None:
            environLocal.printDebug(f'{funcName()} cannot parse interval "{intervalName}"')
            return INVALID_INTERVAL_CLASS

        direction: str = m.group(1)
        quality: str = m.group(2)
        number: int = int(m.group(3))
        if number == 0:
            environLocal.printDebug(f'{funcName()} no zero intervals: "{intervalName}"')
            return INVALID_INTERVAL_CLASS

        octave, dnum = divmod(number - 1, 7)

        adjust: int = 0
        if dnum in PERFECT_INTERVAL_INDICES:
            if quality in ('M', 'm'):
                environLocal.printDebug(
                    f'{funcName()} major/minor quality on perfect interval: "{intervalName}"'
                )
                return INVALID_INTERVAL_CLASS
            if quality[0] in ('A', 'a'):
                adjust = len(quality)
            elif quality[0] in ('D', 'd'):
                adjust = -len(quality)
        else:
            if quality in ('P', 'p'):
                environLocal.printDebug(
                    f'{funcName()} perfect quality on major/minor interval: "{intervalName}"'
                )
                return INVALID_INTERVAL_CLASS
            if quality == 'm':
                adjust = -1
            elif quality[0] in ('A', 'a'):
                adjust = len(quality)
            elif quality[0] in ('D', 'd'):
                adjust = -1 - len(quality)

        classBase: int = self._diatonicMapping[dnum] - self._diatonicMapping[DPC_C]
        output: int = octave * self._base + classBase + adjust
        if direction == '-':
            output = -output
        return output

    '''
    //////////////////////////////
    //
    // HumTransposer::getIntervalName -- Convert a base interval class into
    //     an interval name, such as "M2" for up a major second.  Down is
    //     marked with '-', up has no marker.
    '''
    def getIntervalName(self, intervalClass: int) -> str:
        direction: str = ''
        if intervalClass < 0:
            direction = '-'
            intervalClass = -intervalClass

        octave, chroma = divmod(intervalClass, self._base)

        minDiff: int = chroma
        minIdx: int = 0
        for i in range(1, 7):
            diff: int = chroma - (self._diatonicMapping[i] - self._diatonicMapping[DPC_C])
            if abs(diff) < abs(minDiff):
                minDiff = diff
                minIdx = i

        quality: str
        if minIdx in PERFECT_INTERVAL_INDICES:
            if minDiff == 0:
                quality = 'P'
            elif minDiff < 0:
                quality = 'd' * -minDiff
            else:
                quality = 'A' * minDiff
        else:
            if minDiff == 0:
                quality = 'M'
            elif minDiff == -1:
                quality = 'm'
            elif minDiff < 0:
                quality = 'd' * (-minDiff - 1)
            else:
                quality = 'A' * minDiff

        number: int = minIdx + 1 + 7 * octave
        return direction + quality + str(number)

    def getIntervalBetween(self, pitch1: HumPitch, pitch2: HumPitch) -> int:
        return self.pitchToInt(pitch2) - self.pitchToInt(pitch1)

    '''
    //////////////////////////////
    //
    // HumTransposer::getIntervalName -- Return the interval name between two pitches.
    //    If the second pitch is higher than the first, there will be no
    //    sign on the interval, if the second is lower there will be a '-'.
    '''
    def getIntervalNameBetween(self, pitch1: HumPitch, pitch2: HumPitch) -> str:
        return self.getIntervalName(self.getIntervalBetween(pitch1, pitch2))

    '''
    //////////////////////////////
    //
    // HumTransposer::semitonesToIntervalClass -- convert semitones plus key
    //     signature information into an integer interval class.  For each
    //     semitone count there are two likely spellings; pick the one that
    //     stays closer to the center of the circle of fifths, given the key.
    '''
    def semitonesToIntervalClass(self, keyFifths: int, semitones: int) -> int:
        sign: int = -1 if semitones < 0 else 1
        octave, semitones = divmod(abs(semitones), 12)

        def pick(offset1: int, name1: str, offset2: int, name2: str) -> str:
            sum1: int = keyFifths + offset1 * sign
            sum2: int = keyFifths + offset2 * sign
            return name1 if abs(sum1) < abs(sum2) else name2

        interval: str = 'P1'
        if semitones == 1:
            interval = pick(-5, 'm2', 7, 'A1')
        elif semitones == 2:
            interval = pick(2, 'M2', -10, 'd3')
        elif semitones == 3:
            interval = pick(-3, 'm3', 9, 'A2')
        elif semitones == 4:
            interval = pick(4, 'M3', -8, 'd4')
        elif semitones == 5:
            interval = pick(-1, 'P4', 11, 'A3')
        elif semitones == 6:
            interval = pick(6, 'A4', -6, 'd5')
        elif semitones == 7:
            interval = pick(1, 'P5', -11, 'd6')
        elif semitones == 8:
            interval = pick(-4, 'm6', 8, 'A5')
        elif semitones == 9:
            interval = pick(3, 'M6', -9, 'd7')
        elif semitones == 10:
            interval = pick(-2, 'm7', 10, 'A6')
        elif semitones == 11:
            interval = pick(5, 'M7', -7, 'd8')

        interval = ('-' if sign < 0 else '+') + interval
        output: int = self.getInterval(interval)
        output += sign * octave * self._base
        return output

    def semitonesToIntervalName(self, keyFifths: int, semitones: int) -> str:
        return self.getIntervalName(self.semitonesToIntervalClass(keyFifths, semitones))

    '''
    //////////////////////////////
    //
    // HumTransposer::intervalToSemitones --  Convert a base interval class into
    //   semitones.  Multiple enharmonic equivalent interval classes will collapse into
    //   a single semitone value, so the process is not completely reversable
    //   by calling semitonesToIntervalClass(), but for simple intervals it will
    //   be reversable.
    '''
    def intervalToSemitones(self, interval: t.Union[int, str]) -> int:
        diatonic, chromatic = self.intervalToDiatonicChromatic(interval)
        if chromatic == INVALID_INTERVAL_CLASS:
            return INVALID_INTERVAL_CLASS
        return chromatic

    '''
    //////////////////////////////
    //
    // HumTransposer::intervalToCircleOfFifths -- Returns the circle-of-fiths count
    //    that is the same as the given interval class.  For example
    //    +P5 is 1 and -P5 (which is +P4) is -1.  Augmented unison (A1) is 7.
    //    Positive counts are searched before negative ones.
    '''
    def intervalToCircleOfFifths(self, interval: t.Union[int, str]) -> int:
        if isinstance(interval, str):
            interval = self.getInterval(interval)
            if interval == INVALID_INTERVAL_CLASS:
                return INVALID_INTERVAL_CLASS

        interval %= self._base
        if interval == 0:
            return 0

        p5: int = self.perfectFifthClass()
        p4: int = self.perfectFourthClass()
        for i in range(1, self._base):
            if (p5 * i) % self._base == interval:
                return i
            if (p4 * i) % self._base == interval:
                return -i

        return INVALID_INTERVAL_CLASS

    '''
    //////////////////////////////
    //
    // HumTransposer::circleOfFifthsToIntervalClass -- Inputs a circle-of-fifths value and
    //   returns the interval class as an integer in the current base.
    '''
    def circleOfFifthsToIntervalClass(self, fifths: int) -> int:
        if fifths == 0:
            return 0
        if fifths > 0:
            return (self.perfectFifthClass() * fifths) % self._base
        return (self.perfectFourthClass() * -fifths) % self._base

    def circleOfFifthsToIntervalName(self, fifths: int) -> str:
        return self.getIntervalName(self.circleOfFifthsToIntervalClass(fifths))

    '''
    //////////////////////////////
    //
    // HumTransposer::circleOfFifthsTo*Tonic -- Return the tonic (in octave 0) of
    //    a key signature with the given number of sharps (or flats, if negative),
    //    in the specified mode.
    '''
    def _circleOfFifthsToModeTonic(self, fifths: int, modeDPC: int) -> HumPitch:
        intervalClass: int = self.circleOfFifthsToIntervalClass(fifths)
        return self.intToPitch(
            (self._diatonicMapping[modeDPC] + intervalClass) % self._base
        )

    def circleOfFifthsToMajorTonic(self, fifths: int) -> HumPitch:
        return self._circleOfFifthsToModeTonic(fifths, DPC_C)

    def circleOfFifthsToMinorTonic(self, fifths: int) -> HumPitch:
        return self._circleOfFifthsToModeTonic(fifths, DPC_A)

    def circleOfFifthsToDorianTonic(self, fifths: int) -> HumPitch:
        return self._circleOfFifthsToModeTonic(fifths, DPC_D)

    def circleOfFifthsToPhrygianTonic(self, fifths: int) -> HumPitch:
        return self._circleOfFifthsToModeTonic(fifths, DPC_E)

    def circleOfFifthsToLydianTonic(self, fifths: int) -> HumPitch:
        return self._circleOfFifthsToModeTonic(fifths, DPC_F)

    def circleOfFifthsToMixolydianTonic(self, fifths: int) -> HumPitch:
        return self._circleOfFifthsToModeTonic(fifths, DPC_G)

    def circleOfFifthsToLocrianTonic(self, fifths: int) -> HumPitch:
        return self._circleOfFifthsToModeTonic(fifths, DPC_B)

    '''
    //////////////////////////////
    //
    // HumTransposer::diatonicChromaticToIntervalName -- Convert a diatonic
    //    step count and a chromatic semitone count (as used in *Trd1c2
    //    interpretations) into an interval name.  Both counts include
    //    octaves, so (7, 12) is P8 and (-1, -2) is -M2.
    '''
    def diatonicChromaticToIntervalName(self, diatonic: int, chromatic: int) -> str:
        if diatonic == 0:
            if chromatic == 0:
                return 'P1'
            if chromatic > 0:
                return 'A' * chromatic + '1'
            return 'd' * -chromatic + '1'

        direction: str = ''
        if diatonic < 0:
            direction = '-'
            diatonic = -diatonic
            chromatic = -chromatic

        octave, dnum = divmod(diatonic, 7)
        chromatic -= 12 * octave
        ref: int = DIATONIC_TO_SEMITONE[dnum]

        quality: str
        if dnum in PERFECT_INTERVAL_INDICES:
            if chromatic == ref:
                quality = 'P'
            elif chromatic > ref:
                quality = 'A' * (chromatic - ref)
            else:
                quality = 'd' * (ref - chromatic)
        else:
            if chromatic == ref:
                quality = 'M'
            elif chromatic == ref - 1:
                quality = 'm'
            elif chromatic > ref:
                quality = 'A' * (chromatic - ref)
            else:
                quality = 'd' * (ref - 1 - chromatic)

        return direction + quality + str(octave * 7 + dnum + 1)

    def diatonicChromaticToIntervalClass(self, diatonic: int, chromatic: int) -> int:
        return self.getInterval(self.diatonicChromaticToIntervalName(diatonic, chromatic))

    '''
    //////////////////////////////
    //
    // HumTransposer::intervalToDiatonicChromatic -- Split an interval (class or
    //    name) into a diatonic step count and a chromatic semitone count, both
    //    including any octaves.  Returns (INVALID_INTERVAL_CLASS,
    //    INVALID_INTERVAL_CLASS) for an unparsable name.
    //    We do this by transposing C0 and looking at the resulting pitch, so
    //    intervals like d8 (which are closer to C than to B) come out right. --gregc
    '''
    def intervalToDiatonicChromatic(self, interval: t.Union[int, str]) -> t.Tuple[int, int]:
        if isinstance(interval, str):
            interval = self.getInterval(interval)
            if interval == INVALID_INTERVAL_CLASS:
                return (INVALID_INTERVAL_CLASS, INVALID_INTERVAL_CLASS)

        sign: int = -1 if interval < 0 else 1
        octave, chroma = divmod(abs(interval), self._base)

        pitch: HumPitch = self.intToPitch(self._diatonicMapping[DPC_C] + chroma)
        diatonic: int = pitch.diatonicPC + 7 * (pitch.octave + octave)
        chromatic: int = (
            DIATONIC_TO_SEMITONE[pitch.diatonicPC]
            + pitch.accid
            + 12 * (pitch.octave + octave)
        )
        return (sign * diatonic, sign * chromatic)

    '''
    //////////////////////////////
    //
    // HumTransposer::getKeyTonic -- Convert a key tonic string into a HumPitch
    //      where the octave is the direction to the key tonic.
    //      Input is a single letter (case ignored), followed by any number of
    //      sharps ('#', 's' or 'S') or flats ('b', 'f' or 'F'), optionally
    //      preceded by any number of '+' (up that many octaves) or '-'
    //      (down that many octaves).  e.g. 'G', '+Eb', '--c#'
    //      Returns (pitch, True) on success, or (rest, False).
    '''
    def getKeyTonic(self, keyTonic: str) -> t.Tuple[HumPitch, bool]:
        output: HumPitch = HumPitch()
        m = re.fullmatch(KEY_TONIC_PATTERN, keyTonic)
        if m is None:
            environLocal.printDebug(f'{funcName()} invalid key tonic: "{keyTonic}"')
            return (output, False)

        octaveSigns: str = m.group(1)
        letter: str = m.group(2).upper()
        accidentals: str = m.group(3)

        octave: int = len(octaveSigns)
        if octaveSigns.startswith('-'):
            octave = -octave

        accid: int = len(accidentals)
        if accidentals and accidentals[0] in ('F', 'f', 'b'):
            accid = -accid

        output.setPitch('CDEFGAB'.index(letter), accid, octave)
        return (output, True)

    '''
    //////////////////////////////
    //
    // HumTransposer::isValidIntervalName -- Returns true if the input string
    //    is a valid interval name (format only, the quality/number family
    //    pairing is checked by getInterval).
    '''
    @staticmethod
    def isValidIntervalName(name: str) -> bool:
        return re.fullmatch(VALID_INTERVAL_NAME_PATTERN, name) is not None

    '''
    //////////////////////////////
    //
    // HumTransposer::isValidSemitones -- Returns true if the input string
    //    is a valid semitone interval string.  The string should be an integer
    //    with an optional + or - sign.
    '''
    @staticmethod
    def isValidSemitones(name: str) -> bool:
        return re.fullmatch(VALID_SEMITONES_PATTERN, name) is not None

    '''
    //////////////////////////////
    //
    // HumTransposer::isValidKeyTonic -- Returns true if the input string
    //    is a valid key tonic which can be used to calculate a transposition
    //    interval based on the current key.
    '''
    @staticmethod
    def isValidKeyTonic(name: str) -> bool:
        return re.fullmatch(KEY_TONIC_PATTERN, name) is not None
