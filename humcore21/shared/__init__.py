# ------------------------------------------------------------------------------
# Purpose:       shared is a module of humcore21 containing items shared by the
#                humdrum token graph and the pitch/transposition engine.
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2022 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
__all__ = [
    'SharedConstants',
    'M21Utilities',
    'NoMusic21VersionError',
]

from .sharedconstants import SharedConstants
from .m21utilities import M21Utilities
from .m21utilities import NoMusic21VersionError
