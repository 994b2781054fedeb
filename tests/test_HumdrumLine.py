import pytest

# The things we're testing
from humcore21.humdrum import HumdrumLine
from humcore21.humdrum import HumdrumFile

# test utilities
from tests.Utilities import *

def test_HumdrumLine_default_init():
    line = HumdrumLine()
    line.createTokensFromLine()
    CheckHumdrumLine(line)

def test_HumdrumLine_single_exinterp():
    line = HumdrumLine('**kern')
    line.createTokensFromLine()
    CheckHumdrumLine(line, expectedLine = '**kern',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_INTERPRETATION,
                           expectedTokenCount = 1,
                           expectedIsExclusiveInterpretation = True,
                           expectedIsManipulator = True,
                           expectedTokens = ['**kern'])

def test_HumdrumLine_manipulators():
    line = HumdrumLine('*\t*^\t*-\t*')
    line.createTokensFromLine()
    CheckHumdrumLine(line, expectedLine = '*\t*^\t*-\t*',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_INTERPRETATION,
                           expectedTokenCount = 4,
                           expectedIsExclusiveInterpretation = False,
                           expectedIsManipulator = True,
                           expectedTokens = ['*', '*^', '*-', '*'])
    assert not line.isTerminateInterpretation

def test_HumdrumLine_terminators():
    line = HumdrumLine('*-\t*-')
    line.createTokensFromLine()
    CheckHumdrumLine(line, expectedLine = '*-\t*-',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_INTERPRETATION,
                           expectedTokenCount = 2,
                           expectedIsExclusiveInterpretation = False,
                           expectedIsManipulator = True,
                           expectedTokens = ['*-', '*-'])
    assert line.isTerminateInterpretation

def test_HumdrumLine_barline():
    line = HumdrumLine('=1\t=1\t=1')
    line.createTokensFromLine()
    CheckHumdrumLine(line, expectedLine = '=1\t=1\t=1',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_BARLINE,
                           expectedTokenCount = 3,
                           expectedIsExclusiveInterpretation = False,
                           expectedIsManipulator = False,
                           expectedTokens = ['=1', '=1', '=1'])
    assert line.barlineNumber == 1

def test_HumdrumLine_data():
    line = HumdrumLine('4f]\t.\t2D\t(1cc\t.')
    line.createTokensFromLine()
    CheckHumdrumLine(line, expectedLine = '4f]\t.\t2D\t(1cc\t.',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_DATA,
                           expectedTokenCount = 5,
                           expectedIsExclusiveInterpretation = False,
                           expectedIsManipulator = False,
                           expectedTokens = ['4f]', '.', '2D', '(1cc', '.'])
    assert line.barlineNumber == -1

def test_HumdrumLine_all_null():
    line = HumdrumLine('.\t.\t.')
    line.createTokensFromLine()
    CheckHumdrumLine(line, expectedLine = '.\t.\t.',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_DATA,
                           expectedTokenCount = 3,
                           expectedTokens = ['.', '.', '.'])

    line = HumdrumLine('!\t!')
    line.createTokensFromLine()
    CheckHumdrumLine(line, expectedLine = '!\t!',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_LOCALCOMMENT,
                           expectedTokenCount = 2,
                           expectedTokens = ['!', '!'])

def test_HumdrumLine_global_comment():
    # tabs in a global comment don't split it
    line = HumdrumLine('!!!COM:\tBach, Johann Sebastian')
    line.createTokensFromLine()
    CheckHumdrumLine(line, expectedLine = '!!!COM:\tBach, Johann Sebastian',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_GLOBALCOMMENT,
                           expectedTokenCount = 1,
                           expectedTokens = ['!!!COM:\tBach, Johann Sebastian'])

def test_HumdrumLine_trailing_newline():
    line = HumdrumLine('4c\t4e\r\n')
    line.createTokensFromLine()
    CheckHumdrumLine(line, expectedLine = '4c\t4e',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_DATA,
                           expectedTokenCount = 2,
                           expectedTokens = ['4c', '4e'])

def test_HumdrumLine_index_out_of_range():
    line = HumdrumLine('4c\t4e')
    line.createTokensFromLine()
    assert line[-1].text == '4e'
    CheckIsNone(line[2])
    CheckIsNone(line[-3])

def test_HumdrumLine_tokens_to_line():
    # multiple tabs between tokens survive the round trip
    line = HumdrumLine('4c\t\t4e\t4g')
    line.createTokensFromLine()
    assert [tok.text for tok in line.tokens()] == ['4c', '4e', '4g']
    line[1].text = '4e-'
    assert line.text == '4c\t\t4e\t4g'
    line.createLineFromTokens()
    assert line.text == '4c\t\t4e-\t4g'

def test_HumdrumLine_append_and_insert_token():
    line = HumdrumLine('4c')
    line.createTokensFromLine()
    line.appendToken('4g')
    line.insertToken(1, '4e')
    line.createLineFromTokens()
    CheckHumdrumLine(line, expectedLine = '4c\t4e\t4g',
                           expectedLineNumber = 0,
                           expectedType = LINETYPE_DATA,
                           expectedTokenCount = 3,
                           expectedTokens = ['4c', '4e', '4g'])

def test_HumdrumLine_in_file():
    hf = HumdrumFile()
    hf.readString('**kern\t**kern\n4c\t4e\n*-\t*-\n')
    assert hf.isValid

    line = hf[1]
    CheckHumdrumLine(line, expectedLine = '4c\t4e',
                           expectedLineNumber = 2,
                           expectedType = LINETYPE_DATA,
                           expectedTokenCount = 2,
                           expectedTokens = ['4c', '4e'])
    assert line.ownerFile is hf
    assert line.lineIndex == 1
    assert line.numKernNoteAttacks == 2
    assert line.trackStart(2) is tokenAt(hf, 0, 1)
    assert line.trackEnd(1) is tokenAt(hf, 2, 0)
    CheckIsNone(line.trackStart(3))

    # a standalone line knows nothing about tracks
    orphan = HumdrumLine('4c')
    CheckIsNone(orphan.trackStart(1))
    CheckIsNone(orphan.trackEnd(1))
