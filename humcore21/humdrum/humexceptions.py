# ------------------------------------------------------------------------------
# Name:          HumExceptions.py
# Purpose:       Exceptions that can be raised during Humdrum token graph and
#                pitch/interval operations.
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2022 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
class HumdrumSyntaxError(Exception):
    # poorly formed humdrum input
    pass

class HumdrumInternalError(Exception):
    # unexpected state while building or walking the token graph
    pass

class HumdrumExportError(Exception):
    # error converting a humdrum pitch to something else (e.g. music21)
    pass

class HumPitchFormatError(ValueError):
    # pitch string (kern or scientific) could not be parsed
    pass

class HumIntervalFormatError(ValueError):
    # interval name (e.g. '+M2', '-P5', 'AA4') could not be parsed,
    # or quality does not go with the diatonic number (e.g. 'P2', 'M4')
    pass
