# ------------------------------------------------------------------------------
# Name:          HumdrumFileStructure.py
# Purpose:       Responsible for strand analysis and null token resolution.
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2022 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t
from operator import attrgetter
from pathlib import Path

from music21 import environment

from humcore21.humdrum import HumdrumToken
from humcore21.humdrum import HumdrumFileBase
from humcore21.humdrum import TokenPair

environLocal = environment.Environment('humcore21.humdrum.humdrumfilestructure')


class HumdrumFileStructure(HumdrumFileBase):
    # HumdrumFileStructure has no private data of its own, but pylint is unhappy
    # about data it thinks is uninitialized (because it's initialized in
    # HumdrumFileBase), so let's initialize it here, too.
    def __init__(self, fileName: t.Optional[t.Union[str, Path]] = None) -> None:
        self._strand1d: t.List[TokenPair] = []
        self._strand2d: t.List[t.List[TokenPair]] = []
        super().__init__(fileName)

    def readString(self, contents: str) -> bool:
        if not super().readString(contents):
            return self.isValid
        return self.analyzeStructure()

    '''
    //////////////////////////////
    //
    // HumdrumFileStructure::analyzeStructure -- Analyze the strands of the
    //    file, and resolve the null tokens.
    '''
    def analyzeStructure(self) -> bool:
        self._analyses.structureAnalyzed = True
        if not self.areStrandsAnalyzed:
            if not self.analyzeStrands():
                return self.isValid

        return self.isValid

    @property
    def isStructureAnalyzed(self) -> bool:
        return self._analyses.structureAnalyzed

    '''
    //////////////////////////////
    //
    // HumdrumFileStructure::analyzeStrands -- Analyze spine strands.
    '''
    def analyzeStrands(self) -> bool:
        self._analyses.strandsAnalyzed = True
        self._analyses.nullsAnalyzed = False

        self._strand1d = []
        self._strand2d = []
        if self._parseError:
            # the token graph is incomplete, so there are no strands to find
            return False

        for startTok in self.spineStartList:
            self._strand2d.append([])
            if startTok is None:
                # a *+ with no exclusive interpretation after it (parse error)
                continue
            self.analyzeSpineStrands(self._strand2d[-1], startTok)

        for strandList in self._strand2d:
            strandList.sort(key=attrgetter('firstLineIndex', 'firstFieldIndex'))
            self._strand1d.extend(strandList)

        environLocal.printDebug(
            f'found {len(self._strand1d)} strands in {len(self._strand2d)} spines'
        )

        self.assignStrandsToTokens()
        self.resolveNullTokens()

        return self.isValid

    '''
    ///////////////////////////////
    //
    // HumdrumFileStructure::resolveNullTokens -- Point each null data token at
    //    the closest preceding non-null data token in its strand.  A strand that
    //    starts with null data (e.g. the right side of a split) picks up the last
    //    data token before the split.
    '''
    def resolveNullTokens(self) -> None:
        if self._analyses.nullsAnalyzed:
            return

        self._analyses.nullsAnalyzed = True
        if not self.areStrandsAnalyzed:
            self.analyzeStrands()
            return  # analyzeStrands calls us

        strandPair: TokenPair
        for strandPair in self._strand1d:
            data: t.Optional[HumdrumToken] = None
            for token in strandPair.tokens():
                if not token.isData:
                    token.nullResolution = token
                    continue

                if not token.isNull:
                    data = token
                    token.nullResolution = token
                    continue

                if data is None:
                    data = self._findPreviousNonNullData(token)
                    if data is None:
                        # nothing non-null before us anywhere, so resolve to self
                        data = token

                token.nullResolution = data

    @staticmethod
    def _findPreviousNonNullData(token: HumdrumToken) -> t.Optional[HumdrumToken]:
        tok: t.Optional[HumdrumToken] = token.previousToken0
        while tok is not None:
            if tok.isData and not tok.isNull:
                return tok
            tok = tok.previousToken0
        return None

    '''
    //////////////////////////////
    //
    // HumdrumFileStructure::assignStrandsToTokens -- Store the 1D strand
    //    index number for each token in the file.  Global tokens will have
    //    strand index set to -1.
    '''
    def assignStrandsToTokens(self) -> None:
        for token in self.tokens():
            token.strandIndex = -1

        strandPair: TokenPair
        for i, strandPair in enumerate(self._strand1d):
            for tok in strandPair.tokens():
                tok.strandIndex = i

    '''
    //////////////////////////////
    //
    // HumdrumFileStructure::analyzeSpineStrands -- Fill in the list of
    //   strands in a single spine.
        A *v ends the strand when the field to its left is a *v that merges into
        the same token (the left one carries on).  A *- always ends the strand. --gregc
    '''
    def analyzeSpineStrands(
            self,
            ends: t.List[TokenPair],
            startToken: HumdrumToken
    ) -> None:
        newStrand: TokenPair = TokenPair(startToken, None)
        ends.append(newStrand)

        tok: t.Optional[HumdrumToken] = startToken
        lastTok: HumdrumToken = startToken
        while tok is not None:
            lastTok = tok
            if tok.isMergeInterpretation:
                leftTok: t.Optional[HumdrumToken] = tok.previousFieldToken
                if (leftTok is not None
                        and leftTok.isMergeInterpretation
                        and leftTok.nextToken0 is tok.nextToken0):
                    newStrand.last = tok
                    return

                tok = tok.nextToken0
                continue

            if tok.isTerminateInterpretation:
                newStrand.last = tok
                return

            if tok.nextTokenCount > 1:
                # should only be 2, but allow for generalizing in the future.
                for j in range(1, tok.nextTokenCount):
                    nextTok: t.Optional[HumdrumToken] = tok.nextToken(j)
                    if nextTok is not None:
                        self.analyzeSpineStrands(ends, nextTok)

            tok = tok.nextToken0

        # ran off the end of the file without a *-
        if not self._isQuiet:
            environLocal.warn(
                f'strand starting at line {startToken.lineNumber}, '
                + f'field {startToken.fieldNumber} has no spine terminator'
            )
        newStrand.last = lastTok

    '''
    //////////////////////////////
    //
    // HumdrumFileStructure::getStrandCount --
    '''
    def strandCount(self, spineIndex: t.Optional[int] = None) -> int:
        if not self.areStrandsAnalyzed:
            self.analyzeStrands()

        if spineIndex is None:
            # caller is asking for strand count of entire file
            return len(self._strand1d)

        # caller is asking for strand count of a particular spine
        if spineIndex < 0 or spineIndex >= len(self._strand2d):
            return 0

        return len(self._strand2d[spineIndex])

    '''
    //////////////////////////////
    //
    // HumdrumFileStructure::getStrandStart -- Return the first token
    //    in the a strand.
    // HumdrumFileStructure::getStrandEnd -- Return the last token
    //    in the a strand.
        Out of range indices return None. --gregc
    '''
    def strand1d(self, strandIndex: int) -> t.Optional[TokenPair]:
        if not self.areStrandsAnalyzed:
            self.analyzeStrands()

        if strandIndex < 0 or strandIndex >= len(self._strand1d):
            return None
        return self._strand1d[strandIndex]

    def strand2d(self, spineIndex: int, strandIndex: int) -> t.Optional[TokenPair]:
        if not self.areStrandsAnalyzed:
            self.analyzeStrands()

        if spineIndex < 0 or spineIndex >= len(self._strand2d):
            return None
        spineStrands: t.List[TokenPair] = self._strand2d[spineIndex]
        if strandIndex < 0 or strandIndex >= len(spineStrands):
            return None
        return spineStrands[strandIndex]

    def strandStart1d(self, strandIndex: int) -> t.Optional[HumdrumToken]:
        strand: t.Optional[TokenPair] = self.strand1d(strandIndex)
        if strand is None:
            return None
        return strand.first

    def strandEnd1d(self, strandIndex: int) -> t.Optional[HumdrumToken]:
        strand: t.Optional[TokenPair] = self.strand1d(strandIndex)
        if strand is None:
            return None
        return strand.last

    def strandStart2d(self, spineIndex: int, strandIndex: int) -> t.Optional[HumdrumToken]:
        strand: t.Optional[TokenPair] = self.strand2d(spineIndex, strandIndex)
        if strand is None:
            return None
        return strand.first

    def strandEnd2d(self, spineIndex: int, strandIndex: int) -> t.Optional[HumdrumToken]:
        strand: t.Optional[TokenPair] = self.strand2d(spineIndex, strandIndex)
        if strand is None:
            return None
        return strand.last
