# ------------------------------------------------------------------------------
# Name:          humdrum/__init__.py
# Purpose:       Allows "from humcore21.humdrum import HumdrumFile" et al instead
#                of "from humcore21.humdrum.humdrumfile import HumdrumFile".
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2022 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

from .humexceptions import HumdrumInternalError, HumdrumSyntaxError, HumdrumExportError
from .humexceptions import HumPitchFormatError, HumIntervalFormatError

from .humpitch import HumPitch
from .humpitch import DPC_REST, DPC_C, DPC_D, DPC_E, DPC_F, DPC_G, DPC_A, DPC_B
from .humpitch import INVALID_INTERVAL_CLASS
from .humtransposer import HumTransposer
from .humtransposer import KeyChange, KeyFifthsSemitones, DiatonicChromatic
from .humtransposer import TranspositionSpec

from .convert import Convert
from .humaddress import HumAddress
from .humdrumtoken import HumdrumToken
from .humdrumline import HumdrumLine
from .humdrumfilebase import HumdrumFileBase, TokenPair
from .humdrumfilestructure import HumdrumFileStructure
from .humdrumfile import HumdrumFile
from .m21convert import M21Convert
