# ------------------------------------------------------------------------------
# Purpose:       humcore21 is a music21-based library for walking the token graph
#                of a Humdrum file, and for spelling, transposing and naming
#                intervals between pitches.
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

__all__ = [
    'humdrum',
    'shared',
    'Music21VersionException',
    'checkMusic21Version',
]

from .shared import M21Utilities
from .shared import SharedConstants

class Music21VersionException(Exception):
    # raised if the version of music21 is not recent enough
    pass

def checkMusic21Version() -> None:
    if not M21Utilities.m21VersionIsAtLeast(SharedConstants._MIN_MUSIC21_VERSION):
        raise Music21VersionException('music21 version needs to be 9.1 or greater')
