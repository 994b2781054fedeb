# ------------------------------------------------------------------------------
# Name:          M21Utilities.py
# Purpose:       Utility functions for music21 objects
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

#    All methods are static.  M21Utilities is just a namespace for these utility functions.

import typing as t

import music21 as m21

class NoMusic21VersionError(Exception):
    pass


class M21Utilities:
    '''
        m21VersionIsAtLeast compares music21's VERSION tuple (e.g. (9, 1, 0) or
        (9, 0, 0, 'a11')) against neededVersion, element by element.  If the
        installed version runs out of elements first (and they all matched), it
        is a release, which satisfies a pre-release neededVersion but not a
        numerically longer one.
    '''
    @staticmethod
    def m21VersionIsAtLeast(neededVersion: t.Tuple) -> bool:
        if len(m21.VERSION) == 0:
            raise NoMusic21VersionError('music21 version must be set!')

        for i, needed in enumerate(neededVersion):
            if i >= len(m21.VERSION):
                # installed version has fewer elements, and all the ones it has are equal.
                # A missing pre-release string means a release, which satisfies any
                # pre-release of the same version.
                return isinstance(needed, str)

            have = m21.VERSION[i]
            if isinstance(needed, str) or isinstance(have, str):
                # element 3 is a pre-release string ('a11', 'b2', '')
                # '' (release) sorts after any pre-release
                haveStr: str = str(have)
                neededStr: str = str(needed)
                if haveStr == neededStr:
                    continue
                if haveStr == '':
                    return True
                if neededStr == '':
                    return False
                return haveStr > neededStr

            if int(have) < int(needed):
                return False
            if int(have) > int(needed):
                return True

        return True  # all compared elements equal
