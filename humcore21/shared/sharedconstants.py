# ------------------------------------------------------------------------------
# Name:          SharedConstants.py
# Purpose:       Constants shared by the humdrum token graph and the pitch engine
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

class SharedConstants:
    # must be kept up to date with setup.py:humcore21version
    _HUMCORE21_NAME: str = 'humcore21'
    _HUMCORE21_VERSION: str = '1.0.0'

    # oldest music21 we run against (see humcore21.checkMusic21Version)
    _MIN_MUSIC21_VERSION: t.Tuple[int, int, int] = (9, 1, 0)

    # music21 can only represent accidentals from triple-flat to triple-sharp
    # (plus quadruple, which it spells 'quadruple-sharp'/'quadruple-flat')
    _MAX_M21_ALTER: int = 4

    # diatonic pitch class -> music21 step name
    _DIATONIC_PC_TO_M21_STEP: t.Tuple[str, ...] = ('C', 'D', 'E', 'F', 'G', 'A', 'B')
