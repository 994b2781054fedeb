# ------------------------------------------------------------------------------
# Name:          HumdrumFileBase.py
# Purpose:       Used to store Humdrum text lines from input stream
#                for further parsing.  This class analyzes the basic
#                spine structure after reading a Humdrum file.
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2022 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import sys
import typing as t
from pathlib import Path

from music21 import environment

from humcore21.humdrum import HumdrumInternalError
from humcore21.humdrum import HumdrumToken
from humcore21.humdrum import HumdrumLine
from humcore21.humdrum.humdrumline import trackFromSpineInfo

environLocal = environment.Environment('humcore21.humdrum.humdrumfilebase')

# For debug or unit test print, a simple way to get a string which is the current function name
# with a colon appended.
# for current func name, specify 0 or no argument.
# for name of caller of current func, specify 1.
# for name of caller of caller of current func, specify 2. etc.
# pylint: disable=protected-access
funcName = lambda n=0: sys._getframe(n + 1).f_code.co_name + ':'  # pragma no cover
# pylint: enable=protected-access


# simple class to represent a pair of (first, last) related tokens, e.g. a strand
class TokenPair:
    def __init__(
            self,
            first: t.Optional[HumdrumToken],
            last: t.Optional[HumdrumToken]
    ) -> None:
        self._first: t.Optional[HumdrumToken] = first
        self._last: t.Optional[HumdrumToken] = last

    def __repr__(self) -> str:
        return f'TokenPair({self._first!r}, {self._last!r})'

    @property
    def first(self) -> t.Optional[HumdrumToken]:
        return self._first

    @first.setter
    def first(self, newFirst: t.Optional[HumdrumToken]) -> None:
        self._first = newFirst

    @property
    def last(self) -> t.Optional[HumdrumToken]:
        return self._last

    @last.setter
    def last(self, newLast: t.Optional[HumdrumToken]) -> None:
        self._last = newLast

    # the following two properties are used for sorting (sort by line index, then by field index)
    @property
    def firstLineIndex(self) -> int:
        if t.TYPE_CHECKING:
            assert isinstance(self._first, HumdrumToken)
        return self._first.lineIndex

    @property
    def firstFieldIndex(self) -> int:
        if t.TYPE_CHECKING:
            assert isinstance(self._first, HumdrumToken)
        return self._first.fieldIndex

    '''
        tokens() is a generator that walks from first to last (inclusive),
        following nextToken0.  If last is None, it walks until the spine ends.
    '''
    def tokens(self) -> t.Iterator[HumdrumToken]:
        tok: t.Optional[HumdrumToken] = self._first
        while tok is not None:
            yield tok
            if tok is self._last:
                return
            tok = tok.nextToken0

        if self._last is not None:
            raise HumdrumInternalError(f'never found end of token pair ({self._last})')

    # last to first (inclusive)
    def reversedTokens(self) -> t.Iterator[HumdrumToken]:
        yield from reversed(list(self.tokens()))


class HumFileAnalysis:
    def __init__(self) -> None:
        self.clear()

    def clear(self) -> None:
        self.structureAnalyzed: bool = False
        self.strandsAnalyzed: bool = False
        self.nullsAnalyzed: bool = False


class HumdrumFileBase:
    '''
        Options bits for getTrackSequence() -> t.List[t.List[HumdrumToken]]
    '''
    OPT_PRIMARY: int = 0x001
    OPT_NOEMPTY: int = 0x002
    OPT_NONULL: int = 0x004
    OPT_NOINTERP: int = 0x008
    OPT_NOMANIP: int = 0x010
    OPT_NOCOMMENT: int = 0x020
    OPT_NOGLOBAL: int = 0x040
    OPT_NOREST: int = 0x080
    OPT_NOTIE: int = 0x100
    OPT_DATA: int = (OPT_NOMANIP
                            | OPT_NOCOMMENT
                            | OPT_NOGLOBAL)
    OPT_ATTACKS: int = (OPT_DATA
                            | OPT_NOREST
                            | OPT_NOTIE
                            | OPT_NONULL)

    def __init__(self, fileName: t.Optional[t.Union[str, Path]] = None) -> None:
        # the lines of the file
        self._lines: t.List[HumdrumLine] = []

        '''
            _trackStarts: the exclusive interpretation that starts each track.
            The first element is reserved (there is no track 0), so the number
            of tracks (primary spines) is one less than the size of this list.
            _trackEnds: the spine terminators for each track.  A track can split,
            and its sub-spines can terminate without merging, so there can be
            several per track.
                e.g. trackEnd2 = self._trackEnds[trackNum][2]
        '''
        self._trackStarts: t.List[t.Optional[HumdrumToken]] = [None]
        self._trackEnds: t.List[t.List[HumdrumToken]] = [[]]

        '''
            _strand1d: one-dimensional list of spine strands.
            _strand2d: the same strands, grouped by spine.
        '''
        self._strand1d: t.List[TokenPair] = []
        self._strand2d: t.List[t.List[TokenPair]] = []

        # True if parse errors should not be reported as warnings
        self._isQuiet: bool = False

        # empty if the last read was successful
        self._parseError: str = ''

        # report each parse error only once
        self._displayError: bool = False

        self._analyses: HumFileAnalysis = HumFileAnalysis()

        if fileName is not None:
            self.read(fileName)

    '''
        Conversion to str.  All the lines, with '\n' between them.
    '''
    def __str__(self) -> str:
        return '\n'.join(line.text for line in self._lines)

    '''
        Simple indexer, so you can do line5 = hdFile[5], without giving access to the whole array.
        Equivalent to C++: HumdrumLine& operator[](int index)
        Returns None if index is out of bounds.
    '''
    def __getitem__(self, index: int) -> t.Optional[HumdrumLine]:
        if not isinstance(index, int):
            # if its a slice, out-of-range start/stop won't crash
            return self._lines[index]

        if index < 0:
            index += len(self._lines)

        if index < 0 or index >= len(self._lines):
            return None

        return self._lines[index]

    def __len__(self) -> int:
        return len(self._lines)

    '''
        A generator, so clients can do: for line in hdFile.lines(), without giving them access
        to the whole array
    '''
    def lines(self) -> t.Iterator[HumdrumLine]:
        yield from self._lines

    # every token in the file, line by line, left to right
    def tokens(self) -> t.Iterator[HumdrumToken]:
        for line in self._lines:
            yield from line.tokens()

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::clear -- Reset the contents of a file to be empty.
    '''
    def clear(self) -> None:
        self._lines = []
        self._trackStarts = [None]
        self._trackEnds = [[]]
        self._strand1d = []
        self._strand2d = []
        self._parseError = ''
        self._displayError = False
        self._analyses.clear()

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::read -- Load file contents from a file.
    //    Tries utf-8 first, then latin-1.
    '''
    def read(self, fileName: t.Union[str, Path]) -> bool:
        try:
            with open(fileName, encoding='utf-8') as f:
                contents: str = f.read()
        except UnicodeDecodeError:
            environLocal.printDebug(f'{funcName()} {fileName} is not utf-8, trying latin-1')
            with open(fileName, encoding='latin-1') as f:
                contents = f.read()

        return self.readString(contents)

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::readString -- Read contents from a string rather than
    //    a file.  Any previous contents are thrown away.
    '''
    def readString(self, contents: str) -> bool:
        self.clear()
        if contents.endswith('\n'):
            # lose that last empty line (many editors add it)
            contents = contents[:-1]

        for contentLine in contents.split('\n'):
            self._lines.append(HumdrumLine(contentLine, ownerFile=self))

        self.analyzeBaseFromLines()
        return self.isValid

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::getMergedSpineInfo -- Simplify the spine info of a
    //   group of merging sub-spines.  Adjacent halves of the same split
    //   ('(1)a' and '(1)b') collapse back into the spine they were split
    //   from ('1'); anything left over is joined with spaces.
    '''
    @staticmethod
    def getMergedSpineInfo(
            info: t.List[str],
            startSpine: int,
            numExtraSpines: int
    ) -> str:
        if numExtraSpines < 1:
            # nothing to merge
            return info[startSpine]

        newInfo: t.List[str] = info[startSpine:startSpine + numExtraSpines + 1]
        while len(newInfo) > 1:
            newInfo, simplifiedSomething = HumdrumFileBase._mergeSplitHalves(newInfo)
            if not simplifiedSomething:
                # we've simplified as much as we can, don't loop forever
                break

        return ' '.join(newInfo)

    @staticmethod
    def _mergeSplitHalves(info: t.List[str]) -> t.Tuple[t.List[str], bool]:
        # one left-to-right pass: '(X)a' followed by '(X)b' becomes 'X'
        simplifiedSomething: bool = False
        work: t.List[str] = list(info)
        for i in range(1, len(work)):
            prev: str = work[i - 1]
            curr: str = work[i]
            if not HumdrumFileBase._isSubSpineInfo(prev):
                continue
            if not HumdrumFileBase._isSubSpineInfo(curr):
                continue
            # compare all but trailing a or b
            if prev[:-1] == curr[:-1]:
                simplifiedSomething = True
                work[i - 1] = ''            # removed below
                work[i] = curr[1:-2]        # strip off leading ( and trailing )a or )b

        return [infoStr for infoStr in work if infoStr != ''], simplifiedSomething

    @staticmethod
    def _isSubSpineInfo(info: str) -> bool:
        return info.startswith('(') and info[-2:] in (')a', ')b')

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::getParseError -- Return parse fail reason.
    // HumdrumFileBase::setParseError -- Set an error message from parsing
    //     input data.  If no error message is set when reading data,
    //     the parsing of the data is assumed to be good.
        setParseError returns True if err is empty (i.e. no error). --gregc
    '''
    @property
    def parseError(self) -> str:
        return self._parseError

    @parseError.setter
    def parseError(self, err: str) -> None:
        self.setParseError(err)

    def setParseError(self, err: str) -> bool:
        self._parseError = err
        self._displayError = err != ''
        return err == ''

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::isQuiet -- Returns true if parsing errors
    //    messages should be suppressed. By default the parsing
    //    is "noisy" and the error messages will be reported as warnings.
    '''
    @property
    def isQuiet(self) -> bool:
        return self._isQuiet

    @isQuiet.setter
    def isQuiet(self, newIsQuiet: bool) -> None:
        self._isQuiet = newIsQuiet

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::isValid -- Returns true if last read was
    //     successful.
    '''
    @property
    def isValid(self) -> bool:
        if self._displayError and not self._isQuiet:
            environLocal.warn(self._parseError)
            self._displayError = False

        return self._parseError == ''

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::areStrandsAnalyzed --
    '''
    @property
    def areStrandsAnalyzed(self) -> bool:
        return self._analyses.strandsAnalyzed

    @property
    def areNullsAnalyzed(self) -> bool:
        return self._analyses.nullsAnalyzed

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::analyzeBaseFromLines --
    '''
    def analyzeBaseFromLines(self) -> bool:
        if not self.analyzeTokens():
            return self.isValid
        if not self.analyzeLines():
            return self.isValid
        if not self.analyzeSpines():
            return self.isValid
        if not self.analyzeLinks():
            return self.isValid
        if not self.analyzeTracks():
            return self.isValid
        return self.isValid

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::analyzeTokens -- Generate token array from
    //    current contents of the lines.  If either tokens or the line
    //    is changed, then the other state becomes invalid.
    //    See createLinesFromTokens for regeneration of lines from tokens.
    '''
    def analyzeTokens(self) -> bool:
        for line in self._lines:
            line.createTokensFromLine()
        return self.isValid

    def analyzeLines(self) -> bool:
        for i, line in enumerate(self._lines):
            line.lineIndex = i
        return self.isValid

    def analyzeTracks(self) -> bool:
        for line in self._lines:
            if not line.analyzeTracks():
                return False

        return self.isValid

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::analyzeLinks -- Generate forward and backwards spine links
    //    for each token.
    '''
    def analyzeLinks(self) -> bool:
        prevLine: t.Optional[HumdrumLine] = None
        for line in self._lines:
            if not line.hasSpines:
                continue
            if prevLine is not None:
                if not self.stitchLinesTogether(prevLine, line):
                    return self.isValid
            prevLine = line

        return self.isValid

    @staticmethod
    def _linkTo(prevTok: HumdrumToken, nextLine: HumdrumLine, nextTokenIdx: int) -> None:
        nextTok: t.Optional[HumdrumToken] = nextLine[nextTokenIdx]
        if nextTok is None:
            # analyzeSpines already checked the field counts
            raise HumdrumInternalError(
                f'no token {nextTokenIdx} on line {nextLine.lineNumber}: {nextLine.text}'
            )
        prevTok.makeForwardLink(nextTok)

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::stitchLinesTogether -- Make forward/backward links for
    //    tokens on each line.
    '''
    def stitchLinesTogether(self, prevLine: HumdrumLine, nextLine: HumdrumLine) -> bool:
        # first handle simple cases where the spine assignments are one-to-one:
        if not prevLine.isInterpretation and not nextLine.isInterpretation:
            if prevLine.tokenCount != nextLine.tokenCount:
                return self.setParseError(
                    f'Error lines {prevLine.lineNumber} and {nextLine.lineNumber} '
                    + f'not same length.\nLine {prevLine.lineNumber}: {prevLine.text}\n'
                    + f'Line {nextLine.lineNumber}: {nextLine.text}\n'
                )

            for i, prevTok in enumerate(prevLine.tokens()):
                self._linkTo(prevTok, nextLine, i)

            return True

        # Complicated case: spine manipulators have wreaked havoc
        nextTokenIdx: int = 0
        skipOneToken: bool = False
        mergeCount: int = 0
        lastIdx: int = prevLine.tokenCount - 1
        for i, prevTok in enumerate(prevLine.tokens()):
            if skipOneToken:
                skipOneToken = False
                continue

            if mergeCount != 0 and prevTok.isMergeInterpretation:
                # another adjacent *v: it merges into the same next token
                self._linkTo(prevTok, nextLine, nextTokenIdx)
                mergeCount += 1
                if i != lastIdx:
                    continue
                # last token on the line, so fall through to finish up the merge group

            if mergeCount != 0 and (not prevTok.isMergeInterpretation or i == lastIdx):
                # end of a group of adjacent *v
                if mergeCount == 1:
                    return self.setParseError(
                        'Error: single spine merge indicator \'*v\' on line: '
                        + f'{prevLine.lineNumber}\n{prevLine.text}'
                    )
                nextTokenIdx += 1
                mergeCount = 0
                if prevTok.isMergeInterpretation:
                    # it was the last token, and has been handled
                    continue

            if not prevTok.isManipulator:
                self._linkTo(prevTok, nextLine, nextTokenIdx)
                nextTokenIdx += 1

            elif prevTok.isSplitInterpretation:
                # Connect the previous token to the next two tokens.
                self._linkTo(prevTok, nextLine, nextTokenIdx)
                self._linkTo(prevTok, nextLine, nextTokenIdx + 1)
                nextTokenIdx += 2

            elif prevTok.isMergeInterpretation:
                # first of a group of adjacent *v; the rest are handled at the
                # top of the loop
                self._linkTo(prevTok, nextLine, nextTokenIdx)
                mergeCount = 1
                if i == lastIdx:
                    return self.setParseError(
                        'Error: single spine merge indicator \'*v\' on line: '
                        + f'{prevLine.lineNumber}\n{prevLine.text}'
                    )

            elif prevTok.isExchangeInterpretation:
                # swapping the order of two spines.
                prevTokPlus1: t.Optional[HumdrumToken] = prevLine[i + 1]
                if prevTokPlus1 is None or not prevTokPlus1.isExchangeInterpretation:
                    return self.setParseError(
                        'Error: single spine exchange indicator \'*x\' on line: '
                        + f'{prevLine.lineNumber}\n{prevLine.text}'
                    )

                self._linkTo(prevTokPlus1, nextLine, nextTokenIdx)
                self._linkTo(prevTok, nextLine, nextTokenIdx + 1)
                nextTokenIdx += 2
                skipOneToken = True  # we already processed prevTok[i+1], so skip one prevTok

            elif prevTok.isTerminateInterpretation:
                # No link should be made.
                pass

            elif prevTok.isAddInterpretation:
                # A new data stream is being added, the token after the next
                # linked token should be an exclusive interpretation.
                nextTokPlus1: t.Optional[HumdrumToken] = nextLine[nextTokenIdx + 1]
                if nextTokPlus1 is None or not nextTokPlus1.isExclusiveInterpretation:
                    return self.setParseError(
                        'Error: expecting exclusive interpretation on line '
                        + f'{nextLine.lineNumber} at token {i}, but got {nextTokPlus1}'
                    )
                self._linkTo(prevTok, nextLine, nextTokenIdx)
                nextTokenIdx += 2

            elif prevTok.isExclusiveInterpretation:
                self._linkTo(prevTok, nextLine, nextTokenIdx)
                nextTokenIdx += 1

            else:
                raise HumdrumInternalError(f'unknown manipulator: {prevTok.text}')

        if nextTokenIdx != nextLine.tokenCount:
            return self.setParseError(
                f'''Error: cannot stitch lines together due to alignment problem.
Line {prevLine.lineNumber}: {prevLine.text}
Line {nextLine.lineNumber}: {nextLine.text}
nextTokenIdx = {nextTokenIdx}, nextLine.tokenCount = {nextLine.tokenCount}'''
            )

        return self.isValid

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::analyzeSpines -- Analyze the spine structure of the
    //     data.  Returns false if there was a parse error.
    '''
    def analyzeSpines(self) -> bool:
        dataType: t.List[str] = []
        sinfo: t.List[str] = []

        self._trackStarts = [None]
        self._trackEnds = [[]]

        seenFirstExInterp: bool = False
        for i, line in enumerate(self._lines):
            if not line.hasSpines:
                continue

            if not seenFirstExInterp:
                if not line.isExclusiveInterpretation:
                    return self.setParseError(
                        f'Error on line: {i+1}:\n'
                        + 'Data found before exclusive interpretation\n'
                        + f'LINE: {line.text}'
                    )

                # first line of data in file
                seenFirstExInterp = True
                for j, token in enumerate(line.tokens()):
                    dataType.append(token.text)
                    self.addToTrackStarts(token)
                    sinfo.append(str(j + 1))
                    token.spineInfo = str(j + 1)
                continue

            if len(dataType) != line.tokenCount:
                err = (
                    f'Error on line {line.lineNumber}:\n'
                    + f'Expected {len(dataType)} fields, but found {line.tokenCount}\n'
                    + f'Line is: {line.text}'
                )
                if i > 0:
                    err += f'\nPrevious line is {self._lines[i-1].text}'
                return self.setParseError(err)

            for j, token in enumerate(line.tokens()):
                token.spineInfo = sinfo[j]

            if line.isManipulator:
                success, dataType, sinfo = self.adjustSpines(line, dataType, sinfo)
                if not success:
                    return self.isValid

        return self.isValid

    '''
        HumdrumFileBase::getSpineCount --
    '''
    @property
    def spineCount(self) -> int:
        return self.maxTrack

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::addToTrackStarts -- A starting exclusive interpretation was
    //    found, so store in the list of track starts.  The first index position
    //    in trackstarts is reserved for non-spine usage.  None is a placeholder
    //    for the exclusive interpretation that must follow a *+.
    '''
    def addToTrackStarts(self, token: t.Optional[HumdrumToken]) -> None:
        if token is None:
            self._trackStarts.append(None)
            self._trackEnds.append([])
        elif len(self._trackStarts) > 1 and self._trackStarts[-1] is None:
            self._trackStarts[-1] = token
        else:
            self._trackStarts.append(token)
            self._trackEnds.append([])

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::adjustSpines -- adjust dataType and spineInfo values based
    //   on manipulators found in the data.
        Returns (success, newDataType, newSpineInfo); the lists are empty if
        success is False. --gregc
    '''
    def adjustSpines(
            self,
            line: HumdrumLine,
            dataType: t.List[str],
            spineInfo: t.List[str]
    ) -> t.Tuple[bool, t.List[str], t.List[str]]:
        newType: t.List[str] = []
        newInfo: t.List[str] = []
        mergeCount: int = 0
        skipOneToken: bool = False
        lastIdx: int = line.tokenCount - 1

        for i, token in enumerate(line.tokens()):
            if skipOneToken:
                skipOneToken = False
                continue

            if mergeCount > 0 and token.isMergeInterpretation:
                mergeCount += 1
                if i != lastIdx:
                    continue
                # last token on the line, so fall through to finish up the merge group

            if mergeCount > 0 and (not token.isMergeInterpretation or i == lastIdx):
                if mergeCount == 1:
                    self.setParseError(
                        'Error: single spine merge indicator \'*v\' on line: '
                        + f'{line.lineNumber}\n{line.text}')
                    return (False, [], [])

                startSpine: int = i - mergeCount
                if token.isMergeInterpretation:
                    # we stopped on the last merge, not after it
                    startSpine += 1
                newInfo.append(self.getMergedSpineInfo(spineInfo, startSpine, mergeCount - 1))
                newType.append(dataType[startSpine])
                mergeCount = 0
                if token.isMergeInterpretation:
                    continue

            if token.isSplitInterpretation:
                newType.append(dataType[i])
                newType.append(dataType[i])
                newInfo.append('(' + spineInfo[i] + ')a')
                newInfo.append('(' + spineInfo[i] + ')b')
            elif token.isMergeInterpretation:
                mergeCount = 1
                if i == lastIdx:
                    self.setParseError(
                        'Error: single spine merge indicator \'*v\' on line: '
                        + f'{line.lineNumber}\n{line.text}')
                    return (False, [], [])
            elif token.isAddInterpretation:
                newType.append(dataType[i])
                newType.append('')
                newInfo.append(spineInfo[i])
                self.addToTrackStarts(None)
                newInfo.append(str(self.maxTrack))
            elif token.isExchangeInterpretation:
                nextTok: t.Optional[HumdrumToken] = line[i + 1]
                if nextTok is None or not nextTok.isExchangeInterpretation:
                    self.setParseError(
                        f'Error: *x is all alone on line {line.lineNumber}\n{line.text}'
                    )
                    return (False, [], [])
                newType.append(dataType[i + 1])
                newType.append(dataType[i])
                newInfo.append(spineInfo[i + 1])
                newInfo.append(spineInfo[i])
                skipOneToken = True  # we already processed it here
            elif token.isTerminateInterpretation:
                # file the terminator under its own track
                self._trackEnds[trackFromSpineInfo(spineInfo[i])].append(token)
            elif token.isExclusiveInterpretation:
                newType.append(token.text)
                newInfo.append(spineInfo[i])
                if not (len(self._trackStarts) > 1 and self._trackStarts[-1] is None):
                    self.setParseError(
                        'Error: Exclusive interpretation with no preparation '
                        + f'on line {line.lineNumber} spine index {i}\n'
                        + f'Line: {line.text}'
                    )
                    return (False, [], [])
                self.addToTrackStarts(token)
            else:
                # should only be null interpretation
                newType.append(dataType[i])
                newInfo.append(spineInfo[i])

        return (True, newType, newInfo)

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::createLinesFromTokens -- Generate Humdrum lines strings
    //   from the stored list of tokens.  Call this after changing token text,
    //   before printing the file.
    '''
    def createLinesFromTokens(self) -> None:
        for line in self._lines:
            line.createLineFromTokens()

    @property
    def lineCount(self) -> int:
        return len(self._lines)

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::getMaxTrack -- Returns the number of primary
    //     spines in the data.
    '''
    @property
    def maxTrack(self) -> int:
        return len(self._trackStarts) - 1

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::getSpineStopList -- Return a list of the ending
    //     points of spine strands.
    '''
    @property
    def spineStopList(self) -> t.List[HumdrumToken]:
        return [trackEnd for trackEndList in self._trackEnds for trackEnd in trackEndList]

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::getSpineStartList -- Return a list of the exclusive
    //     interpretations starting spines in the data.  The trackStarts list
    //     contains an empty slot at index 0; this is removed in the returned list.
    '''
    @property
    def spineStartList(self) -> t.List[t.Optional[HumdrumToken]]:
        return self._trackStarts[1:]

    def spineStartListOfType(self, exInterps: t.Union[str, t.List[str]]) -> t.List[HumdrumToken]:
        if isinstance(exInterps, str):
            exInterps = [exInterps]

        wanted: t.List[str] = [
            exInterp if exInterp.startswith('**') else '**' + exInterp
            for exInterp in exInterps
        ]

        output: t.List[HumdrumToken] = []
        for trackStart in self._trackStarts[1:]:
            if trackStart is not None and trackStart.text in wanted:
                output.append(trackStart)

        return output

    def kernSpineStartList(self) -> t.List[HumdrumToken]:
        return self.spineStartListOfType('**kern')

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::getPrimaryTrackSequence -- Return a list of the
    //     given primary spine tokens for a given track (indexed starting at
    //     one and going through getMaxTrack().
    '''
    def getPrimaryTrackSequence(self, track: int, options: int = 0) -> t.List[HumdrumToken]:
        tempSeq: t.List[t.List[HumdrumToken]] = self.getTrackSequence(
            track=track,
            options=(options | self.OPT_PRIMARY)
        )
        return [tokenList[0] for tokenList in tempSeq]

    '''
    /////////////////////////////
    //
    // HumdrumFileBase::getTrackSequence -- Extract a sequence of tokens
    //    for the given spine.  All subspine tokens will be included.
    //    See getPrimaryTrackSequence() if you only want the first subspine for
    //    a track on all lines.
    //
    // The following options are used for the getPrimaryTrackTokens:
    // * OPT_PRIMARY    => only extract primary subspine/subtrack.
    // * OPT_NOEMPTY    => don't include null tokens in extracted list if all
    //                        extracted subspines contains null tokens.
    //                        Includes null interpretations and comments as well.
    // * OPT_NONULL     => don't include any null tokens in extracted list.
    // * OPT_NOINTERP   => don't include interpretation tokens.
    // * OPT_NOMANIP    => don't include spine manipulators (*^, *v, *x, *+,
    //                        but still keep ** and *0).
    // * OPT_NOCOMMENT  => don't include comment tokens.
    // * OPT_NOGLOBAL   => don't include global records (global comments, reference
    //                        records, and empty lines). In other words, only return
    //                        a list of tokens from lines which hasSpines() it true.
    // * OPT_NOREST     => don't include **kern rests.
    // * OPT_NOTIE      => don't include **kern secondary tied notes.
    // Compound options:
    // * OPT_DATA      (OPT_NOMANIP | OPT_NOCOMMENT | OPT_NOGLOBAL)
    //     Only data tokens (including barlines)
    // * OPT_ATTACKS   (OPT_DATA | OPT_NOREST | OPT_NOTIE | OPT_NONULL)
    //     Only note-attack tokens (when extracting **kern data)
    '''
    def getTrackSequence(
            self,
            track: t.Optional[int] = None,
            startToken: t.Optional[HumdrumToken] = None,
            options: int = 0
    ) -> t.List[t.List[HumdrumToken]]:
        output: t.List[t.List[HumdrumToken]] = []

        if startToken is not None:
            track = startToken.track  # get the track number from the token

        optionPrimary: bool = (options & self.OPT_PRIMARY) == self.OPT_PRIMARY
        optionNoNull: bool = (options & self.OPT_NONULL) == self.OPT_NONULL
        optionNoEmpty: bool = (options & self.OPT_NOEMPTY) == self.OPT_NOEMPTY
        optionNoInterp: bool = (options & self.OPT_NOINTERP) == self.OPT_NOINTERP
        optionNoManip: bool = (options & self.OPT_NOMANIP) == self.OPT_NOMANIP
        optionNoComment: bool = (options & self.OPT_NOCOMMENT) == self.OPT_NOCOMMENT
        optionNoGlobal: bool = (options & self.OPT_NOGLOBAL) == self.OPT_NOGLOBAL
        optionNoRest: bool = (options & self.OPT_NOREST) == self.OPT_NOREST
        optionNoTie: bool = (options & self.OPT_NOTIE) == self.OPT_NOTIE

        for line in self._lines:
            if line.isEmpty:
                continue

            if line.isGlobal:
                token0: t.Optional[HumdrumToken] = line[0]
                if not optionNoGlobal and token0 is not None:
                    output.append([token0])
                continue

            trackTokens: t.List[HumdrumToken] = [
                token for token in line.tokens() if token.track == track
            ]

            if optionNoEmpty and all(token.isNull for token in trackTokens):
                continue

            if optionPrimary:
                trackTokens = trackTokens[:1]

            tempTokens: t.List[HumdrumToken] = []
            for token in trackTokens:
                if optionNoInterp and token.isInterpretation:
                    continue
                if optionNoManip and token.isManipulator:
                    continue
                if optionNoNull and token.isNull:
                    continue
                if optionNoComment and token.isComment:
                    continue
                if optionNoRest and token.isRest:
                    continue
                if optionNoTie and token.isSecondaryTiedNote:
                    continue

                tempTokens.append(token)

            if tempTokens:
                output.append(tempTokens)

        return output

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::getTrackStart -- Return the starting exclusive
    //     interpretation for the given track.  Returns None if the track
    //     number is out of range.
    '''
    def trackStart(self, track: t.Optional[int]) -> t.Optional[HumdrumToken]:
        if track is None:
            return None

        if track < 0:
            track += len(self._trackStarts)

        if track < 1 or track >= len(self._trackStarts):
            return None

        return self._trackStarts[track]

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::getTrackEndCount -- Return the number of ending tokens
    //    for the given track.  Spines must start as a single exclusive
    //    interpretation token.  However, since spines may split and merge,
    //    it is possible that there are more than one termination points for a
    //    track.
        Returns 0 if track number is out of range.
    '''
    def trackEndCount(self, track: int) -> int:
        if track < 0:
            track += len(self._trackEnds)
        if track < 1 or track >= len(self._trackEnds):
            return 0

        return len(self._trackEnds[track])

    '''
    //////////////////////////////
    //
    // HumdrumFileBase::getTrackEnd -- Returns the terminal manipulator
    //    token for the given track and subtrack.  Sub-tracks are indexed from 0 up
    //    to but not including getTrackEndCount.
    '''
    def trackEnd(self, track: int, subTrack: int = 0) -> t.Optional[HumdrumToken]:
        if track < 0:
            track += len(self._trackEnds)

        if track < 1 or track > self.maxTrack:
            return None

        if subTrack < 0:
            subTrack += self.trackEndCount(track)

        if subTrack < 0 or subTrack >= len(self._trackEnds[track]):
            return None

        return self._trackEnds[track][subTrack]

    '''
        resolveNullTokens needs strands, which HumdrumFileBase doesn't analyze.
        HumdrumFileStructure overrides this; here, null tokens resolve to
        themselves.
    '''
    def resolveNullTokens(self) -> None:
        return

    '''
    //////////////////////////////
    //
    // operator<< -- Default method of printing HumdrumFiles.  This printing method
    //    assumes that the HumdrumLine string is correct.  If a token is changed
    //    in the file, call HumdrumFileBase::createLinesFromTokens() before printing.
    '''
    def write(self, fp) -> None:
        for line in self._lines:
            line.write(fp)
