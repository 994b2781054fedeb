# ------------------------------------------------------------------------------
# Name:          HumdrumFile.py
# Purpose:       Top-level HumdrumFile object, which adds strand iteration and
#                **kern transposition (via HumTransposer) to the token graph.
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

from humcore21.humdrum import HumdrumToken
from humcore21.humdrum import HumdrumFileStructure
from humcore21.humdrum import TokenPair
from humcore21.humdrum import HumPitch
from humcore21.humdrum import HumTransposer

environLocal = environment.Environment('humcore21.humdrum.humdrumfile')

# For debug or unit test print, a simple way to get a string which is the current function name
# with a colon appended.
# for current func name, specify 0 or no argument.
# for name of caller of current func, specify 1.
# for name of caller of caller of current func, specify 2. etc.
# pylint: disable=protected-access
funcName = lambda n=0: sys._getframe(n + 1).f_code.co_name + ':'  # pragma no cover
# pylint: enable=protected-access


class HumdrumFile(HumdrumFileStructure):
    def __init__(self, fileName: t.Optional[t.Union[str, Path]] = None) -> None:
        super().__init__(fileName)

    '''
        strands() is a generator over the 1-D strand list, in order (all the
        strands of spine 1, sorted by starting line, then spine 2's, etc).
        If spineIndex is given, only that spine's strands are produced.
    '''
    def strands(self, spineIndex: t.Optional[int] = None) -> t.Iterator[TokenPair]:
        if not self.areStrandsAnalyzed:
            self.analyzeStrands()

        if spineIndex is None:
            yield from self._strand1d
            return

        if spineIndex < 0 or spineIndex >= len(self._strand2d):
            return

        yield from self._strand2d[spineIndex]

    def kernStrands(self) -> t.Iterator[TokenPair]:
        for strand in self.strands():
            if strand.first is not None and strand.first.isKern:
                yield strand

    '''
        kernNoteAttacks yields every **kern token that starts a note (or chord),
        strand by strand.  Secondary tied notes, rests and null tokens are skipped.
    '''
    def kernNoteAttacks(self) -> t.Iterator[HumdrumToken]:
        for strand in self.kernStrands():
            for token in strand.tokens():
                if token.isNoteAttack:
                    yield token

    '''
        transposeKern transposes every note (including secondary tied notes) in
        every **kern strand by the transposer's current transposition, rewriting
        the token text in place.  The lines are regenerated from the tokens
        afterward, so str(self) reflects the change.  Returns the number of
        pitches transposed.
    '''
    def transposeKern(self, transposer: HumTransposer) -> int:
        count: int = 0
        for strand in self.kernStrands():
            for token in strand.tokens():
                if not token.isData or token.isNull or token.isRest:
                    continue

                pitches: t.List[HumPitch] = token.kernPitches
                for subtokenIndex, pitch in enumerate(pitches):
                    if pitch.isRest:
                        continue
                    transposer.transposeInPlace(pitch)
                    if token.setKernPitch(subtokenIndex, pitch):
                        count += 1
                    else:
                        environLocal.printDebug(
                            f'{funcName()} could not respell subtoken {subtokenIndex} '
                            + f'of "{token.text}" (line {token.lineNumber})'
                        )

        self.createLinesFromTokens()
        return count
