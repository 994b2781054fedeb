# ------------------------------------------------------------------------------
# Name:          HumdrumToken.py
# Purpose:       Represents a single field in a line of a Humdrum file
#                The intersection of line and spine, if you will...
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2022 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import sys
import re
import typing as t

from humcore21.humdrum import HumAddress
from humcore21.humdrum import HumPitch
from humcore21.humdrum import Convert

# For debug or unit test print, a simple way to get a string which is the current function name
# with a colon appended.
# for current func name, specify 0 or no argument.
# for name of caller of current func, specify 1.
# for name of caller of caller of current func, specify 2. etc.
# pylint: disable=protected-access
funcName = lambda n=0: sys._getframe(n + 1).f_code.co_name + ':'  # pragma no cover
# pylint: enable=protected-access

# spine manipulators:
SPLIT_TOKEN: str = '*^'
MERGE_TOKEN: str = '*v'
EXCHANGE_TOKEN: str = '*x'
TERMINATE_TOKEN: str = '*-'
ADD_TOKEN: str = '*+'
# Also exclusive interpretations which start with '**' followed by the data type.

# other special tokens:
NULL_DATA: str = '.'
NULL_INTERPRETATION: str = '*'
NULL_COMMENT_LOCAL: str = '!'
NULL_COMMENT_GLOBAL: str = '!!'

# transposition interpretation, e.g. '*Trd1c2' (up a major second)
TRANSPOSE_PREFIX: str = '*Trd'


class HumdrumToken:
    def __init__(self, token: t.Optional[str] = '') -> None:
        self._text: str = token if token is not None else ''

        self._subtokens: t.List[str] = []
        self._subtokensGenerated: bool = False

        # where we live in the file (line, field, track, spine path)
        self._address: HumAddress = HumAddress()

        '''
            _nextTokens: the tokens in the spine which immediately follow this one.
            Usually one, two after a *^ split, none after a *- terminator.
            _previousTokens: the tokens in the spine which immediately precede
            this one.  Usually one, several after a *v merge, none for an
            exclusive interpretation.
        '''
        self._nextTokens: t.List[HumdrumToken] = []
        self._nextToken0: t.Optional[HumdrumToken] = None
        self._previousTokens: t.List[HumdrumToken] = []
        self._previousToken0: t.Optional[HumdrumToken] = None

        # 1-D index of the strand this token is in (-1 if strands not analyzed)
        self._strandIndex: int = -1

        # for a null token, the (non-null) token it repeats
        self._nullResolution: t.Optional[HumdrumToken] = None

        self._atLeastOneCachedTokenTextPropertyExists: bool = False
        self._atLeastOneCachedDataTypePropertyExists: bool = False

    # In C++ a HumdrumToken is also a string().  We have a standard "conversion"
    # to string instead.  Most clients will call str(hdToken), or use hdToken.text.
    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f'HumdrumToken({self._text!r})'

    cachedTokenTextProperties: t.Set[str] = {
        '_isDataCached',
        '_isInterpretationCached',
        '_isNonNullDataCached',
        '_isNullDataCached',
        '_isNullCached',
        '_isBarlineCached',
        '_isCommentCached',
        '_isLocalCommentCached',
        '_isGlobalCommentCached',
        '_isChordCached',
        '_isExclusiveInterpretationCached',
        '_isSplitInterpretationCached',
        '_isMergeInterpretationCached',
        '_isExchangeInterpretationCached',
        '_isTerminateInterpretationCached',
        '_isAddInterpretationCached',
        '_isManipulatorCached',
        '_isRestCached',
        '_isNoteCached'
    }

    cachedDataTypeProperties: t.Set[str] = {
        '_isKernCached',
        '_isStaffDataTypeCached',
        '_isRestCached',
        '_isNoteCached'
    }

    # _isRestCached/_isNoteCached are in both sets: they depend on the text,
    # and on whether or not we are in a **kern spine.
    def _clearCachedTokenTextProperties(self) -> None:
        # The cached attributes don't exist until first use, so we pop them
        # instead of setting them to None.
        if self._atLeastOneCachedTokenTextPropertyExists:
            for attrib in self.cachedTokenTextProperties:
                self.__dict__.pop(attrib, None)
            self._atLeastOneCachedTokenTextPropertyExists = False

    def _clearCachedDataTypeProperties(self) -> None:
        if self._atLeastOneCachedDataTypePropertyExists:
            for attrib in self.cachedDataTypeProperties:
                self.__dict__.pop(attrib, None)
            self._atLeastOneCachedDataTypePropertyExists = False

    '''
    //////////////////////////////
    //
    // HumdrumToken::getText --
    // HumdrumToken::setText -- Changing the text throws away every cached
    //     classification, so isRest, isNull, etc. are recomputed.  The spine
    //     structure is not reanalyzed, so don't turn a data token into a
    //     manipulator.
    '''
    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, newText: str) -> None:
        self._text = newText
        self._subtokensGenerated = False
        if self._atLeastOneCachedTokenTextPropertyExists:
            self._clearCachedTokenTextProperties()

    '''
    //////////////////////////////
    //
    // HumdrumToken::getDataType -- Get the exclusive interpretation token for
    //     the token's track.
    '''
    @property
    def dataType(self) -> 'HumdrumToken':
        return self._address.dataType

    '''
    //////////////////////////////
    //
    // HumdrumToken::isDataType -- Returns true if the data type of the token
    //   matches the test data type.  The leading '**' is optional.
    '''
    def isDataType(self, dtype: str) -> bool:
        if dtype.startswith('**'):
            return dtype == self.dataType.text

        return dtype == self.dataType.text[2:]

    @property
    def isKern(self) -> bool:
        # cache the result for performance
        try:
            return self._isKernCached
        except AttributeError:
            self._isKernCached: bool = self.isDataType('**kern')
            self._atLeastOneCachedDataTypePropertyExists = True
        return self._isKernCached

    '''
    //////////////////////////////
    //
    // HumdrumToken::isStaffDataType -- Returns true if the spine type represents
    //   a notated staff.  **kern is the only one we know about.
    '''
    @property
    def isStaffDataType(self) -> bool:
        # cache the result for performance
        try:
            return self._isStaffDataTypeCached
        except AttributeError:
            self._isStaffDataTypeCached: bool = self.isKern
            self._atLeastOneCachedDataTypePropertyExists = True
        return self._isStaffDataTypeCached

    @property
    def spineInfo(self) -> str:
        return self._address.spineInfo

    @spineInfo.setter
    def spineInfo(self, newSpineInfo: str) -> None:
        self._address.spineInfo = newSpineInfo

    @property
    def lineIndex(self) -> int:
        return self._address.lineIndex

    @property
    def lineNumber(self) -> int:
        return self._address.lineNumber

    @property
    def fieldIndex(self) -> int:
        return self._address.fieldIndex

    @fieldIndex.setter
    def fieldIndex(self, newFieldIndex: int) -> None:
        self._address.fieldIndex = newFieldIndex

    @property
    def fieldNumber(self) -> int:
        return self._address.fieldNumber

    '''
    //////////////////////////////
    //
    // HumdrumToken::getTrack -- Get the track (similar to a staff in MEI).
    '''
    @property
    def track(self) -> t.Optional[int]:
        return self._address.track

    @track.setter
    def track(self, newTrack: t.Optional[int]) -> None:
        self._address.track = newTrack
        if self._atLeastOneCachedDataTypePropertyExists:
            # dataType depends on ownerLine and track
            self._clearCachedDataTypeProperties()

    '''
    //////////////////////////////
    //
    // HumdrumToken::getSubtrack -- Get the subtrack (similar to a layer
    //    in MEI).
    '''
    @property
    def subTrack(self) -> int:
        return self._address.subTrack

    @subTrack.setter
    def subTrack(self, newSubTrack: int) -> None:
        self._address.subTrack = newSubTrack

    @property
    def subTrackCount(self) -> int:
        return self._address.subTrackCount

    @subTrackCount.setter
    def subTrackCount(self, newSubTrackCount: int) -> None:
        self._address.subTrackCount = newSubTrackCount

    '''
    //////////////////////////////
    //
    // HumdrumToken::getTrackString -- Gets "track.subtrack" as a string.  The
    //     subtrack is left off if the track has only one active sub-spine.
    '''
    @property
    def trackString(self) -> str:
        return self._address.trackString

    '''
    //////////////////////////////
    //
    // HumdrumToken::getNextTokens -- Returns a list of the next
    //   tokens in the spine after this token.
    '''
    @property
    def nextTokens(self) -> t.List['HumdrumToken']:
        return self._nextTokens

    @nextTokens.setter
    def nextTokens(self, newNextTokens: t.List['HumdrumToken']) -> None:
        self._nextTokens = newNextTokens
        self.updateNextToken0()

    '''
    //////////////////////////////
    //
    // HumdrumToken::getNextToken -- Returns the next token in the
    //    spine.  When there is no next token (when the current
    //    token is a spine terminator), then None will be returned.
    '''
    def nextToken(self, index: int = 0) -> t.Optional['HumdrumToken']:
        if 0 <= index < len(self._nextTokens):
            return self._nextTokens[index]
        return None

    # nextToken(0), for speed
    @property
    def nextToken0(self) -> t.Optional['HumdrumToken']:
        return self._nextToken0

    def updateNextToken0(self) -> None:
        self._nextToken0 = self.nextToken(0)

    @property
    def nextTokenCount(self) -> int:
        return len(self._nextTokens)

    '''
    //////////////////////////////
    //
    // HumdrumToken::getPreviousToken -- Returns the previous token in the
    //    spine, or None for an exclusive interpretation.  After a merge
    //    there can be more than one.
    '''
    def previousToken(self, index: int = 0) -> t.Optional['HumdrumToken']:
        if 0 <= index < len(self._previousTokens):
            return self._previousTokens[index]
        return None

    @property
    def previousToken0(self) -> t.Optional['HumdrumToken']:
        return self._previousToken0

    def updatePreviousToken0(self) -> None:
        self._previousToken0 = self.previousToken(0)

    @property
    def previousTokens(self) -> t.List['HumdrumToken']:
        return self._previousTokens

    @previousTokens.setter
    def previousTokens(self, newPreviousTokens: t.List['HumdrumToken']) -> None:
        self._previousTokens = newPreviousTokens
        self.updatePreviousToken0()

    @property
    def previousTokenCount(self) -> int:
        return len(self._previousTokens)

    '''
    //////////////////////////////
    //
    // HumdrumToken::makeForwardLink -- Link a following spine token to this one.
    //    Used by the HumdrumFileBase::analyzeLinks function.
    '''
    def makeForwardLink(self, nextToken: 'HumdrumToken') -> None:
        self._nextTokens.append(nextToken)
        self.updateNextToken0()
        nextToken._previousTokens.append(self)
        nextToken.updatePreviousToken0()

    '''
    //////////////////////////////
    //
    // HumdrumToken::getNextFieldToken --
        This returns the token in the next field of the ownerLine of this token,
        or None if we're in the last field. --gregc
    '''
    @property
    def nextFieldToken(self) -> t.Optional['HumdrumToken']:
        if self.ownerLine is None:
            return None
        if self.fieldIndex >= self.ownerLine.tokenCount - 1:
            return None
        return self.ownerLine[self.fieldIndex + 1]

    @property
    def previousFieldToken(self) -> t.Optional['HumdrumToken']:
        if self.ownerLine is None:
            return None
        if self.fieldIndex < 1:
            return None
        return self.ownerLine[self.fieldIndex - 1]

    '''
    //////////////////////////////
    //
    // HumdrumToken::getOwner -- Returns the HumdrumLine that owns this token.
    '''
    @property
    def ownerLine(self):  # returns t.Optional[HumdrumLine]
        return self._address.ownerLine

    @ownerLine.setter
    def ownerLine(self, newOwnerLine) -> None:  # newOwnerLine: t.Optional[HumdrumLine]
        self._address.ownerLine = newOwnerLine
        if self._atLeastOneCachedDataTypePropertyExists:
            self._clearCachedDataTypeProperties()

    '''
    //////////////////////////////
    //
    // HumdrumToken::getStrandIndex -- Returns the 1-D strand index
    //    that the token belongs to in the owning HumdrumFile.
    //    Returns -1 if there is no strand assignment.
    '''
    @property
    def strandIndex(self) -> int:
        return self._strandIndex

    @strandIndex.setter
    def strandIndex(self, newStrandIndex: int) -> None:
        self._strandIndex = newStrandIndex

    '''
    //////////////////////////////
    //
    // HumdrumToken::resolveNull -- For a null token, the closest preceding
    //     non-null token in the same strand.  For anything else, self.
    //     The first request analyzes the whole file.
    '''
    @property
    def nullResolution(self) -> 'HumdrumToken':
        if self._nullResolution is not None:
            return self._nullResolution

        if self.ownerLine is not None and self.ownerLine.ownerFile is not None:
            self.ownerLine.ownerFile.resolveNullTokens()

        if self._nullResolution is not None:
            return self._nullResolution

        return self

    @nullResolution.setter
    def nullResolution(self, newNullResolution: t.Optional['HumdrumToken']) -> None:
        self._nullResolution = newNullResolution

    '''
    //////////////////////////////
    //
    // HumdrumToken::isManipulator -- Returns true if token is one of:
    //    SPLIT_TOKEN     = "*^"  == spine splitter
    //    MERGE_TOKEN     = "*v"  == spine merger
    //    EXCHANGE_TOKEN  = "*x"  == spine exchanger
    //    ADD_TOKEN       = "*+"  == spine adder
    //    TERMINATE_TOKEN = "*-"  == spine terminator
    //    **...  == exclusive interpretation
    '''
    @property
    def isManipulator(self) -> bool:
        # cache the result for performance
        try:
            return self._isManipulatorCached
        except AttributeError:
            self._isManipulatorCached: bool = (
                self.isSplitInterpretation
                or self.isMergeInterpretation
                or self.isExchangeInterpretation
                or self.isAddInterpretation
                or self.isTerminateInterpretation
                or self.isExclusiveInterpretation
            )
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isManipulatorCached

    '''
    //////////////////////////////
    //
    // HumdrumToken::isRest -- Returns true if the token is a (kern) rest.
    //     A null data token is a rest if the token it repeats is a rest.
    '''
    @property
    def isRest(self) -> bool:
        try:
            return self._isRestCached
        except AttributeError:
            self._isRestCached: bool = False

            # BUGFIX: Without this "if self.isData", isRest('**kern') will return True
            # BUGFIX: (there's an 'r')
            if self.isData and self.isKern:
                tokenText: str = self._text
                if self.isNull:
                    tokenText = self.nullResolution.text
                self._isRestCached = Convert.isKernRest(tokenText)

            # isRest changes if text changes, and also if dataType changes
            self._atLeastOneCachedTokenTextPropertyExists = True
            self._atLeastOneCachedDataTypePropertyExists = True

        return self._isRestCached

    '''
    //////////////////////////////
    //
    // HumdrumToken::isNote -- Returns true if the token is a (kern) note
    //     (possessing a pitch).  Null tokens are not notes, even if they
    //     repeat one.
    '''
    @property
    def isNote(self) -> bool:
        try:
            return self._isNoteCached
        except AttributeError:
            self._isNoteCached: bool = False
            if self.isData and not self.isNull and self.isKern:
                self._isNoteCached = Convert.isKernNote(self._text)
            self._atLeastOneCachedTokenTextPropertyExists = True
            self._atLeastOneCachedDataTypePropertyExists = True

        return self._isNoteCached

    '''
    //////////////////////////////
    //
    // HumdrumToken::isSustainedNote -- Returns true if the token represents
    //     a sounding note, but not the attack portion.  Should only be
    //     applied to **kern data.
    '''
    @property
    def isSustainedNote(self) -> bool:
        token: HumdrumToken = self
        if self.isNull:
            token = self.nullResolution
        return token.isSecondaryTiedNote

    '''
    //////////////////////////////
    //
    // HumdrumToken::isNoteAttack -- Returns true if the token represents
    //     the attack of a note.  Should only be applied to **kern data.
    //     A null token is the attack of nothing.  --gregc
    '''
    @property
    def isNoteAttack(self) -> bool:
        if not self.isNote:
            return False
        return not self.isSecondaryTiedNote

    '''
    //////////////////////////////
    //
    // HumdrumToken::isSecondaryTiedNote -- Returns true if the token
    //     is a (kern) note (possessing a pitch) and has '_' or ']' characters.
    '''
    @property
    def isSecondaryTiedNote(self) -> bool:
        if not self.isKern:
            return False

        return Convert.isKernSecondaryTiedNote(self._text)

    '''
        Tie predicates: isTieStart ('['), isTieContinue ('_'), isTieEnd (']').
        Only notes in **kern spines have ties.
    '''
    @property
    def isTieStart(self) -> bool:
        return self.isNote and Convert.hasKernTieStart(self._text)

    @property
    def isTieContinue(self) -> bool:
        return self.isNote and Convert.hasKernTieContinue(self._text)

    @property
    def isTieEnd(self) -> bool:
        return self.isNote and Convert.hasKernTieEnd(self._text)

    @property
    def isBarline(self) -> bool:
        # cache the result for performance
        try:
            return self._isBarlineCached
        except AttributeError:
            self._isBarlineCached: bool = self._text.startswith('=')
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isBarlineCached

    '''
        barlineNumber returns the first number found.
        e.g. it returns 23 for both '=!|23' and '=23a:|', etc
    '''
    @property
    def barlineNumber(self) -> int:
        if not self.isBarline:
            return -1

        m = re.search(r'(\d+)', self._text)
        if m:
            return int(m.group(1))
        return -1

    '''
    //////////////////////////////
    //
    // HumdrumToken::isCommentGlobal -- Returns true of the token starts with "!!".
    //    Currently confused with reference records.
    '''
    @property
    def isGlobalComment(self) -> bool:
        # cache the result for performance
        try:
            return self._isGlobalCommentCached
        except AttributeError:
            self._isGlobalCommentCached: bool = self._text.startswith('!!')
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isGlobalCommentCached

    @property
    def isLocalComment(self) -> bool:
        # cache the result for performance
        try:
            return self._isLocalCommentCached
        except AttributeError:
            self._isLocalCommentCached: bool = self.isComment and not self.isGlobalComment
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isLocalCommentCached

    @property
    def isComment(self) -> bool:
        # cache the result for performance
        try:
            return self._isCommentCached
        except AttributeError:
            self._isCommentCached: bool = self._text.startswith('!')
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isCommentCached

    '''
    //////////////////////////////
    //
    // HumdrumToken::isData -- Returns true if not an interpretation, barline
    //      or local comment.  This will not work on synthetic tokens generated
    //      from an empty line.  So this function should be called only on tokens
    //      in lines which pass the HumdrumLine::hasSpines() test.
    '''
    @property
    def isData(self) -> bool:
        # cache the result for performance
        try:
            return self._isDataCached
        except AttributeError:
            self._isDataCached: bool = (
                not self.isInterpretation
                and not self.isComment
                and not self.isBarline
            )
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isDataCached

    @property
    def isInterpretation(self) -> bool:
        # cache the result for performance
        try:
            return self._isInterpretationCached
        except AttributeError:
            self._isInterpretationCached: bool = self._text.startswith('*')
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isInterpretationCached

    @property
    def isNonNullData(self) -> bool:
        # cache the result for performance
        try:
            return self._isNonNullDataCached
        except AttributeError:
            self._isNonNullDataCached: bool = self.isData and not self.isNull
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isNonNullDataCached

    @property
    def isNullData(self) -> bool:
        # cache the result for performance
        try:
            return self._isNullDataCached
        except AttributeError:
            self._isNullDataCached: bool = self.isData and self.isNull
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isNullDataCached

    '''
    //////////////////////////////
    //
    // HumdrumToken::isChord -- True if is a chord (more than one space-separated
    //     subtoken).  Presuming you know what data type you are accessing.
    '''
    @property
    def isChord(self) -> bool:
        # cache the result for performance
        try:
            return self._isChordCached
        except AttributeError:
            self._isChordCached: bool = ' ' in self._text
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isChordCached

    @property
    def isExclusiveInterpretation(self) -> bool:
        # cache the result for performance
        try:
            return self._isExclusiveInterpretationCached
        except AttributeError:
            self._isExclusiveInterpretationCached: bool = self._text.startswith('**')
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isExclusiveInterpretationCached

    @property
    def isSplitInterpretation(self) -> bool:
        # cache the result for performance
        try:
            return self._isSplitInterpretationCached
        except AttributeError:
            self._isSplitInterpretationCached: bool = self._text == SPLIT_TOKEN
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isSplitInterpretationCached

    @property
    def isMergeInterpretation(self) -> bool:
        # cache the result for performance
        try:
            return self._isMergeInterpretationCached
        except AttributeError:
            self._isMergeInterpretationCached: bool = self._text == MERGE_TOKEN
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isMergeInterpretationCached

    @property
    def isExchangeInterpretation(self) -> bool:
        # cache the result for performance
        try:
            return self._isExchangeInterpretationCached
        except AttributeError:
            self._isExchangeInterpretationCached: bool = self._text == EXCHANGE_TOKEN
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isExchangeInterpretationCached

    @property
    def isTerminateInterpretation(self) -> bool:
        # cache the result for performance
        try:
            return self._isTerminateInterpretationCached
        except AttributeError:
            self._isTerminateInterpretationCached: bool = self._text == TERMINATE_TOKEN
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isTerminateInterpretationCached

    @property
    def isAddInterpretation(self) -> bool:
        # cache the result for performance
        try:
            return self._isAddInterpretationCached
        except AttributeError:
            self._isAddInterpretationCached: bool = self._text == ADD_TOKEN
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isAddInterpretationCached

    '''
    //////////////////////////////
    //
    // HumdrumToken::isNull -- Returns true if the token is a null token,
    //   either for data, comments, or interpretations.  Does not consider
    //   null global comments since they are not part of the spine structure.
    '''
    @property
    def isNull(self) -> bool:
        # cache the result for performance
        try:
            return self._isNullCached
        except AttributeError:
            self._isNullCached: bool = (
                self._text in (NULL_DATA, NULL_INTERPRETATION, NULL_COMMENT_LOCAL)
            )
            self._atLeastOneCachedTokenTextPropertyExists = True
        return self._isNullCached

    '''
        isTranspose: a '*Trd1c2'-style transposition interpretation.
        transpose returns the 'd1c2' part (or '' if not isTranspose), which
        Convert.transToDiatonicChromatic understands.
    '''
    @property
    def isTranspose(self) -> bool:
        return self._text.startswith(TRANSPOSE_PREFIX)

    @property
    def transpose(self) -> str:
        if not self.isTranspose:
            return ''
        # everything after '*Tr' -> 'dNcM'
        return self._text[3:]

    '''
    //////////////////////////////
    //
    // HumdrumToken::getSubtokenCount -- Returns the number of space-separated
    //     sub-tokens in a token.
    '''
    @property
    def subtokenCount(self) -> int:
        return len(self.subtokens)

    '''
        The subtokens property generates a list of subtoken strings for the
        client to index into.  We cache it for performance. --gregc
    '''
    @property
    def subtokens(self) -> t.List[str]:
        if not self._subtokensGenerated:
            self._subtokens = self._text.split(' ')
            self._subtokensGenerated = True

        return self._subtokens

    '''
    //////////////////////////////
    //
    // HumdrumToken::replaceSubtoken -- Replace one subtoken (out of range
    //     indices are ignored), and rebuild the token text.
    '''
    def replaceSubtoken(self, index: int, newSubtoken: str) -> None:
        if index < 0 or index >= self.subtokenCount:
            return
        subtokens: t.List[str] = list(self.subtokens)
        subtokens[index] = newSubtoken
        self.text = ' '.join(subtokens)
        # setting self.text cleared this, but we already have the split
        self._subtokens = subtokens
        self._subtokensGenerated = True

    '''
        kernPitches returns a HumPitch for each subtoken of a **kern data token
        (a rest for any subtoken that is a rest, or has no pitch).  Null tokens
        and non-kern tokens return an empty list.
    '''
    @property
    def kernPitches(self) -> t.List[HumPitch]:
        if not self.isKern or not self.isNonNullData:
            return []

        output: t.List[HumPitch] = []
        for subtoken in self.subtokens:
            pitch: HumPitch = HumPitch()
            pitch.fromKernSpelling(subtoken)
            output.append(pitch)
        return output

    '''
        setKernPitch rewrites the pitch in one subtoken of a **kern note, leaving
        everything else (duration, ties, beams, etc) alone.  Returns False if
        there is no such subtoken, or it has no pitch to replace.
    '''
    def setKernPitch(self, subtokenIndex: int, pitch: HumPitch) -> bool:
        if subtokenIndex < 0 or subtokenIndex >= self.subtokenCount:
            return False

        subtoken: str = self.subtokens[subtokenIndex]
        if Convert.isKernRest(subtoken):
            return False

        parts: t.Optional[t.Tuple[str, str, str]] = Convert.kernPitchSplit(subtoken)
        if parts is None:
            return False

        prefix, _oldPitch, suffix = parts
        self.replaceSubtoken(subtokenIndex, prefix + pitch.toKernSpelling() + suffix)
        return True
