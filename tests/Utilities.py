from humcore21.humdrum import *
from humcore21.humdrum import HumdrumToken
from humcore21.humdrum import HumdrumLine
from humcore21.humdrum import HumdrumFile
from humcore21.humdrum import HumPitch
from humcore21.humdrum import TokenPair

TOKENTYPE_DATA                  = 'data'
TOKENTYPE_BARLINE               = 'barline'
TOKENTYPE_INTERPRETATION        = 'interpretation'
TOKENTYPE_LOCALCOMMENT          = 'localComment'
TOKENTYPE_GLOBALCOMMENT         = 'globalComment'

SPECIFICTYPE_NOTHINGSPECIFIC    = 'nothing'
SPECIFICTYPE_NULLDATA           = 'nullData'
SPECIFICTYPE_NULLINTERPRETATION = 'nullInterpretation'
SPECIFICTYPE_NULLCOMMENT        = 'nullComment'
SPECIFICTYPE_NOTE               = 'note'
SPECIFICTYPE_REST               = 'rest'
SPECIFICTYPE_SPLIT              = 'split'
SPECIFICTYPE_MERGE              = 'merge'
SPECIFICTYPE_EXCHANGE           = 'exchange'
SPECIFICTYPE_ADD                = 'add'
SPECIFICTYPE_TERMINATE          = 'terminate'
SPECIFICTYPE_EXINTERP           = 'exinterp'

LINETYPE_EMPTY              = 'empty'               # empty string:                     ''
LINETYPE_GLOBALCOMMENT      = 'globalComment'       # starts with two or more bangs:    '!!'
LINETYPE_LOCALCOMMENT       = 'localComment'        # starts with exactly one bang:     '!'
LINETYPE_BARLINE            = 'barline'             # starts with equal sign:           '='
LINETYPE_INTERPRETATION     = 'interpretation'      # starts with asterisk:             '*'
LINETYPE_DATA               = 'data'                # anything else


# some line types are comments
commentTypeTuple = (LINETYPE_LOCALCOMMENT,
                    LINETYPE_GLOBALCOMMENT)

# some line types are local (i.e. they have spines)
hasSpinesTypeTuple = (LINETYPE_LOCALCOMMENT,
                      LINETYPE_DATA,
                      LINETYPE_BARLINE,
                      LINETYPE_INTERPRETATION)

# some line types are global (including EMPTY, apparently!)
isGlobalTypeTuple = (LINETYPE_EMPTY,
                     LINETYPE_GLOBALCOMMENT)


def CheckHumdrumToken( token: HumdrumToken,
                        expectedText: str = '',
                        expectedDataType: str = '',
                        expectedTokenType: str = TOKENTYPE_DATA,
                        expectedSpecificType: str = SPECIFICTYPE_NOTHINGSPECIFIC
                        ):

    #print('CheckHumdrumToken: token = "{}"'.format(token))

    # set up some derived expectations
    expectedIsData = expectedTokenType == TOKENTYPE_DATA
    expectedIsBarline = expectedTokenType == TOKENTYPE_BARLINE
    expectedIsInterpretation = expectedTokenType == TOKENTYPE_INTERPRETATION
    expectedIsLocalComment = expectedTokenType == TOKENTYPE_LOCALCOMMENT
    expectedIsGlobalComment = expectedTokenType == TOKENTYPE_GLOBALCOMMENT
    expectedIsComment = expectedIsLocalComment or expectedIsGlobalComment

    expectedIsNote = expectedSpecificType == SPECIFICTYPE_NOTE
    expectedIsRest = expectedSpecificType == SPECIFICTYPE_REST
    expectedIsNullData = expectedSpecificType == SPECIFICTYPE_NULLDATA
    expectedIsNullInterpretation = expectedSpecificType == SPECIFICTYPE_NULLINTERPRETATION
    expectedIsNullComment = expectedSpecificType == SPECIFICTYPE_NULLCOMMENT
    expectedIsNull = expectedIsNullData or expectedIsNullInterpretation or expectedIsNullComment

    expectedIsSplitInterpretation = expectedSpecificType == SPECIFICTYPE_SPLIT
    expectedIsMergeInterpretation = expectedSpecificType == SPECIFICTYPE_MERGE
    expectedIsExchangeInterpretation = expectedSpecificType == SPECIFICTYPE_EXCHANGE
    expectedIsAddInterpretation = expectedSpecificType == SPECIFICTYPE_ADD
    expectedIsTerminateInterpretation = expectedSpecificType == SPECIFICTYPE_TERMINATE
    expectedIsExclusiveInterpretation = expectedSpecificType == SPECIFICTYPE_EXINTERP
    expectedIsManipulator = expectedIsSplitInterpretation \
                                or expectedIsMergeInterpretation \
                                or expectedIsExchangeInterpretation \
                                or expectedIsAddInterpretation \
                                or expectedIsTerminateInterpretation \
                                or expectedIsExclusiveInterpretation

    expectedIsKern = expectedDataType == '**kern'
    expectedIsStaffDataType = expectedIsKern

    # text
    assert token.text == expectedText
    assert str(token) == expectedText

    # Token Type
    assert token.isData == expectedIsData
    assert token.isBarline == expectedIsBarline
    assert token.isInterpretation == expectedIsInterpretation
    assert token.isLocalComment == expectedIsLocalComment
    assert token.isGlobalComment == expectedIsGlobalComment
    assert token.isComment == expectedIsComment

    # Specific Type
    assert token.isNullData == expectedIsNullData
    assert token.isNonNullData == (expectedIsData and not expectedIsNullData)
    assert token.isNull == expectedIsNull
    assert token.isNote == expectedIsNote
    assert token.isRest == expectedIsRest
    assert token.isSplitInterpretation == expectedIsSplitInterpretation
    assert token.isMergeInterpretation == expectedIsMergeInterpretation
    assert token.isExchangeInterpretation == expectedIsExchangeInterpretation
    assert token.isAddInterpretation == expectedIsAddInterpretation
    assert token.isTerminateInterpretation == expectedIsTerminateInterpretation
    assert token.isExclusiveInterpretation == expectedIsExclusiveInterpretation
    assert token.isManipulator == expectedIsManipulator

    # Data Type
    assert token.dataType.text == expectedDataType
    assert token.isDataType(expectedDataType) == True
    if expectedDataType[:2] == '**':
        assert token.isDataType(expectedDataType[1:]) == False
        assert token.isDataType(expectedDataType[2:]) == True
    assert token.isKern == expectedIsKern
    assert token.isStaffDataType == expectedIsStaffDataType

def CheckHumdrumLine( line: HumdrumLine,
                        expectedLine: str = '',
                        expectedLineNumber: int = 0,
                        expectedType: str = LINETYPE_EMPTY,
                        expectedTokenCount: int = 1,
                        expectedIsExclusiveInterpretation: bool = False,
                        expectedIsManipulator: bool = False,
                        expectedTokens: [str] = None ):
    # set up some derived expectations
    expectedIsData = expectedType == LINETYPE_DATA
    expectedIsBarline = expectedType == LINETYPE_BARLINE
    expectedIsInterpretation = expectedType == LINETYPE_INTERPRETATION
    expectedIsLocalComment = expectedType == LINETYPE_LOCALCOMMENT
    expectedIsGlobalComment = expectedType == LINETYPE_GLOBALCOMMENT
    expectedIsComment = expectedType in commentTypeTuple
    expectedHasSpines = expectedType in hasSpinesTypeTuple
    expectedIsGlobal = expectedType in isGlobalTypeTuple

    expectedIsAllNull = False # if no spines
    if expectedHasSpines:
        # default to True if hasSpines, then if we see a non-null token, we set to False and get out
        expectedIsAllNull = True
        for tokenText in expectedTokens:
            if expectedIsInterpretation and tokenText != '*':
                expectedIsAllNull = False
                break
            if expectedIsLocalComment and tokenText != '!':
                expectedIsAllNull = False
                break
            if (expectedIsData or expectedIsBarline) and tokenText != '.':
                expectedIsAllNull = False
                break

    assert line.lineNumber == expectedLineNumber
    assert line.text == expectedLine
    assert str(line) == expectedLine

    # interrogate the line various ways
    assert line.isAllNull == expectedIsAllNull
    assert line.isData == expectedIsData
    assert line.isBarline == expectedIsBarline
    assert line.isInterpretation == expectedIsInterpretation
    assert line.isLocalComment == expectedIsLocalComment
    assert line.isGlobalComment == expectedIsGlobalComment
    assert line.isComment == expectedIsComment
    assert line.hasSpines == expectedHasSpines # isLocal, in other words
    assert line.isGlobal == expectedIsGlobal
    assert line.isExclusiveInterpretation == expectedIsExclusiveInterpretation
    assert line.isManipulator == expectedIsManipulator

    # check that tokenCount and the length of all the arrays are expectedTokenCount
    assert line.tokenCount == expectedTokenCount
    assert len(line) == expectedTokenCount
    assert len(list(line.tokens())) == expectedTokenCount

    # check the line tokens themselves
    if expectedTokens is not None: # is None if we have no way of expecting a particular list of tokens
        assert [str(token) for token in line.tokens()] == expectedTokens
        assert [line[tokIdx].text for tokIdx in range(0, line.tokenCount)] == expectedTokens

    # every token knows where it lives
    for tokIdx, token in enumerate(line.tokens()):
        assert token.ownerLine is line
        assert token.fieldIndex == tokIdx

def CheckHumPitch(pitch: HumPitch,
                    expectedDiatonicPC: int,
                    expectedAccid: int,
                    expectedOctave: int,
                    expectedKern: str = None,
                    expectedScientific: str = None):
    assert isinstance(pitch, HumPitch)
    assert pitch.diatonicPC == expectedDiatonicPC
    assert pitch.accid == expectedAccid
    assert pitch.octave == expectedOctave
    if expectedKern is not None:
        assert pitch.toKernSpelling() == expectedKern
    if expectedScientific is not None:
        assert pitch.toScientificSpelling() == expectedScientific

def CheckTokenPair(pair: TokenPair,
                    expectedFirstText: str,
                    expectedFirstLineIndex: int,
                    expectedFirstFieldIndex: int,
                    expectedLastText: str,
                    expectedTokenTexts: [str] = None):
    assert pair.first is not None
    assert pair.last is not None
    assert pair.first.text == expectedFirstText
    assert pair.firstLineIndex == expectedFirstLineIndex
    assert pair.firstFieldIndex == expectedFirstFieldIndex
    assert pair.last.text == expectedLastText
    if expectedTokenTexts is not None:
        assert [tok.text for tok in pair.tokens()] == expectedTokenTexts
        assert [tok.text for tok in pair.reversedTokens()] == list(reversed(expectedTokenTexts))

def tokenAt(hf: HumdrumFile, lineIdx: int, fieldIdx: int) -> HumdrumToken:
    line = hf[lineIdx]
    assert line is not None
    token = line[fieldIdx]
    assert token is not None
    return token

def getTokenDataTypes(hf: HumdrumFile) -> [[str]]:
    #returns a '**blah' string for every token in every line in the file
    return [[token.dataType.text for token in line.tokens()] for line in hf.lines()]

def getSpineInfos(hf: HumdrumFile) -> [[str]]:
    return [[token.spineInfo for token in line.tokens()] for line in hf.lines()]

def CheckString(string, expectedString):
    assert isinstance(string, str)
    assert string == expectedString

def CheckIsNone(obj):
    assert obj is None
