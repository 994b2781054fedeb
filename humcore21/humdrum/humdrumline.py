# ------------------------------------------------------------------------------
# Name:          HumdrumLine.py
# Purpose:       Used to store Humdrum text lines, split into tokens,
#                along with the track analysis of those tokens.
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

from humcore21.humdrum import HumdrumToken

# a token, then the tabs that follow it
TOKEN_AND_TABS_PATTERN: str = r'([^\t]+)(\t*)'

# the track number in spine info such as '(((3)b)a)b' or '2 3'
TRACK_FROM_SPINE_INFO_PATTERN: str = r'\(*(\d+)'


def trackFromSpineInfo(spineInfo: str) -> int:
    m = re.match(TRACK_FROM_SPINE_INFO_PATTERN, spineInfo)
    if m is None:
        return 0
    return int(m.group(1))


class HumdrumLine:
    def __init__(
            self,
            line: str = '',
            asGlobalToken: bool = False,
            ownerFile=None  # HumdrumFile
    ) -> None:
        from humcore21.humdrum import HumdrumFile

        if line.endswith('\n'):
            line = line[:-1]
        # files written on Windows
        if line.endswith('\r'):
            line = line[:-1]

        self._text: str = line

        # the HumdrumFile that manages this line (None if there isn't one)
        self._ownerFile: t.Optional[HumdrumFile] = ownerFile

        # index of this line in the owning HumdrumFile, set by analyzeLines()
        self._lineIndex: int = -1

        '''
            _tokens: the tab-separated fields of the line.  These are made by
            createTokensFromLine().  If you change the tokens, call
            createLineFromTokens() to update the line text (and vice versa).
            _numTabsAfterToken: how many tabs follow each token (so the
            original spacing of the file survives a round-trip).
        '''
        self._tokens: t.List[HumdrumToken] = []
        self._numTabsAfterToken: t.List[int] = []
        if asGlobalToken:
            self._tokens = [HumdrumToken(line)]
            self._tokens[0].ownerLine = self
            self._tokens[0].fieldIndex = 0
            self._numTabsAfterToken = [0]

    # In C++ a HumdrumLine is also a string().  Here, clients call str(hdLine),
    # or hdLine.text.
    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f'HumdrumLine({self._text!r})'

    '''
    //////////////////////////////
    //
    // HumdrumLine::token -- Returns the given token on the line.
            Returns None if index is out of bounds. Negative indices count
            back from the end, as usual. --gregc
    '''
    def __getitem__(self, index) -> t.Optional[HumdrumToken]:
        if not isinstance(index, int):
            # a slice: out-of-range start/stop won't crash
            return self._tokens[index]

        if index < 0:
            index += len(self._tokens)

        if index < 0 or index >= len(self._tokens):
            return None

        return self._tokens[index]

    def __len__(self) -> int:
        return len(self._tokens)

    # generator, so you can do: for token in line.tokens()
    def tokens(self) -> t.Iterator[HumdrumToken]:
        yield from self._tokens

    '''
    //////////////////////////////
    //
    // HumdrumLine::getText --
    // HumdrumLine::setText -- Get the textual content of the line.  Note that
    //    you may need to run HumdrumLine::createLineFromTokens() if the tokens
    //    of the line have changed.
    '''
    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, newText: str) -> None:
        self._text = newText

    '''
    //////////////////////////////
    //
    // HumdrumLine::isComment -- Returns true if the first character
    //   in the string is '!'. Could be local, global, or a reference record.
    '''
    @property
    def isComment(self) -> bool:
        return self._text.startswith('!')

    @property
    def isLocalComment(self) -> bool:
        return self.isComment and not self.isGlobalComment

    @property
    def isGlobalComment(self) -> bool:
        return self._text.startswith('!!')

    '''
    //////////////////////////////
    //
    // HumdrumLine::isExclusive -- Returns true if the first two characters
    //     are "**".
        Returns True if any token on the line starts with '**', to pick up
        lines like:
        *   **data <-- new exclusive interpretation after *+
        --gregc
    '''
    @property
    def isExclusiveInterpretation(self) -> bool:
        if not self._tokens:
            return self._text.startswith('**')
        for token in self._tokens:
            if token.isExclusiveInterpretation:
                return True
        return False

    '''
    //////////////////////////////
    //
    // HumdrumLine::isTerminator -- Returns true if all tokens on the line
    //    are terminators.
    '''
    @property
    def isTerminateInterpretation(self) -> bool:
        if not self._tokens:
            # if tokens have not been parsed, check line text
            return self._text.startswith('*-')

        for token in self._tokens:
            if not token.isTerminateInterpretation:
                return False

        return True

    @property
    def isInterpretation(self) -> bool:
        return self._text.startswith('*')

    @property
    def isBarline(self) -> bool:
        return self._text.startswith('=')

    '''
        barlineNumber returns barline number of first token (-1 if not a barline).
    '''
    @property
    def barlineNumber(self) -> int:
        if not self._tokens:
            return -1
        return self._tokens[0].barlineNumber

    '''
    //////////////////////////////
    //
    // HumdrumLine::isData -- Returns true if data (but not measure).
    '''
    @property
    def isData(self) -> bool:
        if self.isComment or self.isInterpretation or self.isBarline or self.isEmpty:
            return False
        return True

    '''
    //////////////////////////////
    //
    // HumdrumLine::isAllNull -- Returns true if all tokens on the line
    //    are null ("." if a data line, "*" if an interpretation line, "!"
    //    if a local comment line).
    '''
    @property
    def isAllNull(self) -> bool:
        if not self.hasSpines:
            return False

        for token in self._tokens:
            if not token.isNull:
                return False

        return True

    @property
    def lineIndex(self) -> int:
        return self._lineIndex

    @lineIndex.setter
    def lineIndex(self, newLineIndex: int) -> None:
        self._lineIndex = newLineIndex

    @property
    def lineNumber(self) -> int:
        return self._lineIndex + 1

    '''
    //////////////////////////////
    //
    // HumdrumLine::getTrackStart --  Returns the starting exclusive interpretation
    //    for the given spine/track.
    '''
    def trackStart(self, track: t.Optional[int]) -> t.Optional[HumdrumToken]:
        if self._ownerFile is None:
            return None
        return self._ownerFile.trackStart(track)

    def trackEnd(self, track: int, subSpine: int = 0) -> t.Optional[HumdrumToken]:
        if self._ownerFile is None:
            return None
        return self._ownerFile.trackEnd(track, subSpine)

    '''
    //////////////////////////////
    //
    // HumdrumLine::hasSpines -- Returns true if the line contains spines.  This
    //   means the the line is not empty or a global comment (which can include
    //   reference records.
    '''
    @property
    def hasSpines(self) -> bool:
        return not self.isGlobal

    @property
    def isGlobal(self) -> bool:
        return self.isEmpty or self.isGlobalComment

    '''
    //////////////////////////////
    //
    // HumdrumLine::isManipulator -- Returns true if any tokens on the line are
    //   manipulator interpretations.  Only null interpretations are allowed on
    //   lines which contain manipulators, but the parser currently does not
    //   enforce this rule.
    '''
    @property
    def isManipulator(self) -> bool:
        for token in self._tokens:
            if token.isManipulator:
                return True
        return False

    @property
    def isEmpty(self) -> bool:
        return self._text == ''

    @property
    def tokenCount(self) -> int:
        return len(self._tokens)

    '''
    //////////////////////////////
    //
    // HumdrumLine::createTokensFromLine -- Chop up a HumdrumLine string into
    //     individual tokens.  Empty lines and global comments are a single token.
        Returns number of tokens created
    '''
    def createTokensFromLine(self) -> int:
        # throw away any previous tokens (the file structure will need
        # re-analysis after this)
        self._tokens = []
        self._numTabsAfterToken = []

        if self._text == '' or self._text.startswith('!!'):
            self._addToken(HumdrumToken(self._text), 0)
            return 1

        for m in re.finditer(TOKEN_AND_TABS_PATTERN, self._text):
            self._addToken(HumdrumToken(m.group(1)), len(m.group(2)))

        return len(self._tokens)

    def _addToken(self, token: HumdrumToken, numTabsAfter: int) -> None:
        token.ownerLine = self
        token.fieldIndex = len(self._tokens)
        self._tokens.append(token)
        self._numTabsAfterToken.append(numTabsAfter)

    '''
    //////////////////////////////
    //
    // HumdrumLine::createLineFromTokens --  Re-generate a HumdrumLine string from
    //    individual tokens on the line.  This function will be necessary to
    //    run before printing a HumdrumFile if you have changed any tokens on the
    //    line.  Otherwise, changes in the tokens will not be passed on to the
    //    printing of the line.
    '''
    def createLineFromTokens(self) -> None:
        # tokens added by hand may not have a tab count yet
        numEntriesNeeded = len(self._tokens) - len(self._numTabsAfterToken)
        if numEntriesNeeded > 0:
            self._numTabsAfterToken += [1] * numEntriesNeeded

        pieces: t.List[str] = []
        lastIdx: int = len(self._tokens) - 1
        for i, token in enumerate(self._tokens):
            pieces.append(token.text)
            if i < lastIdx:
                # at least one tab between tokens
                pieces.append('\t' * max(1, self._numTabsAfterToken[i]))
            else:
                pieces.append('\t' * self._numTabsAfterToken[i])
            token.ownerLine = self
            token.fieldIndex = i

        self._text = ''.join(pieces)

    '''
    //////////////////////////////
    //
    // HumdrumLine::analyzeTracks -- Calculate the subtrack info for subspines.
    //   Subtracks index subspines strictly from left to right on the line.
    //   Subspines can be exchanged and be represented left to right out of
    //   original order.
    '''
    def analyzeTracks(self) -> bool:
        if not self.hasSpines:
            return True

        maxTrack: int = 0
        for token in self._tokens:
            track: int = trackFromSpineInfo(token.spineInfo)
            maxTrack = max(maxTrack, track)
            token.track = track

        subTracks: t.List[int] = [0] * (maxTrack + 1)
        currSubTrack: t.List[int] = [0] * (maxTrack + 1)

        for token in self._tokens:
            if token.track is not None:
                subTracks[token.track] += 1

        for token in self._tokens:
            tokenTrack: t.Optional[int] = token.track
            if tokenTrack is None:
                token.subTrackCount = 0
                token.subTrack = 0
                continue

            token.subTrackCount = subTracks[tokenTrack]
            if subTracks[tokenTrack] > 1:
                currSubTrack[tokenTrack] += 1
                token.subTrack = currSubTrack[tokenTrack]
            else:
                token.subTrack = 0

        return True

    '''
    //////////////////////////////
    //
    // HumdrumLine::getOwner -- Return the HumdrumFile which manages
    //   (owns) this line.
    '''
    @property
    def ownerFile(self):  # -> HumdrumFile
        return self._ownerFile

    @ownerFile.setter
    def ownerFile(self, newOwnerFile) -> None:  # newOwnerFile: HumdrumFile
        self._ownerFile = newOwnerFile

    '''
    //////////////////////////////
    //
    // HumdrumLine::appendToken -- add a token at the end of the current
    //      list of tokens in the line.
    // HumdrumLine::insertToken -- Add a token before the given token position.
        Both take ownership of the token, and renumber the fields. --gregc
    '''
    def appendToken(self, token: t.Union[HumdrumToken, str], tabCount: int = 0) -> None:
        if isinstance(token, str):
            token = HumdrumToken(token)
        self._addToken(token, tabCount)

    def insertToken(self, index: int, token: t.Union[HumdrumToken, str], tabCount: int = 0) -> None:
        if isinstance(token, str):
            token = HumdrumToken(token)
        token.ownerLine = self
        self._tokens.insert(index, token)
        self._numTabsAfterToken.insert(index, tabCount)
        for i, tok in enumerate(self._tokens):
            tok.fieldIndex = i

    '''
    //////////////////////////////
    //
    // HumdrumLine::getKernNoteAttacks -- Return the number of kern notes
    //    that attack on a line.
    '''
    @property
    def numKernNoteAttacks(self) -> int:
        output: int = 0
        for token in self._tokens:
            if not token.isKern:
                continue
            if token.isNoteAttack:
                output += 1
        return output

    '''
    //////////////////////////////
    //
    // operator<< -- Print a HumdrumLine.
    '''
    def write(self, fp) -> None:
        fp.write(self._text + '\n')
