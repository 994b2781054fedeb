# ------------------------------------------------------------------------------
# Name:          Convert.py
# Purpose:       Conversions and predicates on **kern token text
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2022 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

import re
import typing as t

# the pitch part of a **kern subtoken: repeated letter, then repeated '#' or '-'
KERN_PITCH_PATTERN: str = r'([A-Ga-g]+)(#+|-+)?'

class Convert:

    '''
        *** kern ***
    '''

    '''
    //////////////////////////////
    //
    // Convert::isKernRest -- Returns true if the input string represents
    //   a **kern rest.
    '''
    @staticmethod
    def isKernRest(text: str) -> bool:
        return 'r' in text

    '''
    //////////////////////////////
    //
    // Convert::isKernNote -- Returns true if the input string represents
    //   a **kern note (i.e., token with a pitch, not a null token or a rest).
    '''
    @staticmethod
    def isKernNote(text: str) -> bool:
        # rests can have note values (for positioning) without being a note,
        # so check if it's a rest before looking for note values.
        if Convert.isKernRest(text):
            return False

        return any(ch in 'abcdefgABCDEFG' for ch in text)

    '''
    //////////////////////////////
    //
    // Convert::isKernSecondaryTiedNote -- Returns true if the input string
    //   represents a **kern note (i.e., token with a pitch,
    //   not a null token or a rest) and has a '_' or ']' character.
    '''
    @staticmethod
    def isKernSecondaryTiedNote(text: str) -> bool:
        if not Convert.isKernNote(text):
            return False

        return '_' in text or ']' in text

    '''
        Tie markers: '[' starts a tie, '_' continues one (the note is both
        the end of one tie and the start of the next), ']' ends a tie.
    '''
    @staticmethod
    def hasKernTieStart(text: str) -> bool:
        return '[' in text

    @staticmethod
    def hasKernTieContinue(text: str) -> bool:
        return '_' in text

    @staticmethod
    def hasKernTieEnd(text: str) -> bool:
        return ']' in text

    '''
        *** pitch ***
    '''

    '''
    //////////////////////////////
    //
    // Convert::kernToOctaveNumber -- Convert a kern token into an octave number.
    //    Middle C is the start of the 4th octave. -1000 is returned if there
    //    is not pitch in the string.  Only the first subtoken in the string is
    //    considered.
    '''
    @staticmethod
    def kernToOctaveNumber(text: str) -> int:
        ucCount: int = 0
        lcCount: int = 0

        if text == '.':
            return -1000

        for ch in text:
            if ch == ' ':
                break
            if ch == 'r':
                return -1000

            if ch in 'ABCDEFG':
                ucCount += 1
            elif ch in 'abcdefg':
                lcCount += 1

        if ucCount > 0 and lcCount > 0:
            # invalid pitch description
            return -1000

        if ucCount > 0:
            return 4 - ucCount

        if lcCount > 0:
            return 3 + lcCount

        return -1000

    '''
    //////////////////////////////
    //
    // Convert::kernToAccidentalCount -- Convert a kern token into a count
    //    of accidentals in the first subtoken.  Sharps are assigned to the
    //    value +1 and flats to -1.  So a double sharp is +2 and a double
    //    flat is -2.  Only the first subtoken in the string is considered.
    '''
    @staticmethod
    def kernToAccidentalCount(text: str) -> int:
        output: int = 0
        for ch in text:
            if ch == ' ':
                break

            if ch == '-':
                output -= 1
            elif ch == '#':
                output += 1

        return output

    '''
    //////////////////////////////
    //
    // Convert::kernToDiatonicPC -- Convert a kern token into a diatonic
    //    note pitch-class where 0="C", 1="D", ..., 6="B".  -1000 is returned
    //    if the note is rest, and -2000 if there is no pitch information in the
    //    input string. Only the first subtoken in the string is considered.
    '''
    @staticmethod
    def kernToDiatonicPC(text: str) -> int:
        for ch in text:
            if ch == ' ':
                break
            if ch == 'r':
                return -1000

            idx: int = 'cdefgab'.find(ch.lower())
            if idx >= 0:
                return idx

        return -2000

    '''
        kernPitchSplit splits one **kern subtoken into the text before the pitch,
        the pitch itself (letters plus accidentals), and the text after the pitch.
        e.g. '(8.cc#L' -> ('(8.', 'cc#', 'L').  Returns None if there is no pitch.
        Client code uses this to rewrite just the pitch of a note after
        transposition.
    '''
    @staticmethod
    def kernPitchSplit(subtoken: str) -> t.Optional[t.Tuple[str, str, str]]:
        m = re.search(KERN_PITCH_PATTERN, subtoken)
        if m is None:
            return None
        return (subtoken[:m.start()], m.group(0), subtoken[m.end():])

    '''
        *** transposition interpretations ***
    '''

    @staticmethod
    def transToDiatonicChromatic(trans: str) -> t.Tuple[t.Optional[int], t.Optional[int]]:
        # This pattern will match *ITrdNcM and *TrdNcM and dNcM
        m = re.search(r'd([+-]?\d+)c([+-]?\d+)', trans)
        if not m:
            return (None, None)
        return (int(m.group(1)), int(m.group(2)))

    @staticmethod
    def diatonicChromaticToTrans(d: int, c: int) -> str:
        return 'd' + str(d) + 'c' + str(c)
