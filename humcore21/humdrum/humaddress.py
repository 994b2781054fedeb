# ------------------------------------------------------------------------------
# Name:          HumAddress.py
# Purpose:       Where a token lives in a HumdrumFile: line, field, track,
#                subtrack and spine path.
#
# Authors:       Greg Chapman <gregc@mac.com>
#                Humdrum code derived/translated from humlib (authored by
#                       Craig Stuart Sapp <craig@ccrma.stanford.edu>)
#
# Copyright:     (c) 2021-2022 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from humcore21.humdrum import HumdrumSyntaxError

# more than this and the file is almost certainly garbage
MAX_TRACK_COUNT: int = 1000


class HumAddress:
    def __init__(self) -> None:
        from humcore21.humdrum import HumdrumToken
        from humcore21.humdrum import HumdrumLine
        self._track: t.Optional[int] = None
        self._subTrack: int = -1
        self._subTrackCount: int = 0
        self._fieldIndex: int = -1
        self._ownerLine: t.Optional[HumdrumLine] = None
        self._spineInfo: str = ''

        # the exclusive interpretation token that starts our track
        self._dataTypeTokenCached: t.Optional[HumdrumToken] = None

    '''
    //////////////////////////////
    //
    // HumAddress::getLineIndex -- Returns the line index in the owning HumdrumFile,
    //    or -1 if no HumdrumLine owns the token yet.
    '''
    @property
    def lineIndex(self) -> int:
        if self._ownerLine is None:
            return -1
        return self._ownerLine.lineIndex

    @property
    def lineNumber(self) -> int:
        return self.lineIndex + 1

    '''
    //////////////////////////////
    //
    // HumAddress::getTrack -- The track (spine) number, i.e. the first number in
    //   the spine info string.  None if spine analysis hasn't been done, or if
    //   the line has no spines.
    '''
    @property
    def track(self) -> t.Optional[int]:
        return self._track

    @track.setter
    def track(self, newTrack: t.Optional[int]) -> None:
        if newTrack is not None and newTrack < 0:
            newTrack = None
        if newTrack is not None and newTrack > MAX_TRACK_COUNT:
            raise HumdrumSyntaxError(f'too many tracks (limit is {MAX_TRACK_COUNT})')
        self._track = newTrack
        self._dataTypeTokenCached = None

    '''
    //////////////////////////////
    //
    // HumAddress::getSubtrack -- The one-based index of this sub-spine among the
    //   active sub-spines of its track on the owning line.  All sub-spines are
    //   numbered left to right, regardless of how they were split (or exchanged).
    //   A track with only one active sub-spine has subtrack 0.
    '''
    @property
    def subTrack(self) -> int:
        if self._subTrackCount == 1:
            return 0
        return self._subTrack

    @subTrack.setter
    def subTrack(self, newSubTrack: int) -> None:
        newSubTrack = max(newSubTrack, 0)
        if newSubTrack > MAX_TRACK_COUNT:
            raise HumdrumSyntaxError(f'too many subTracks (limit is {MAX_TRACK_COUNT})')
        self._subTrack = newSubTrack

    @property
    def subTrackCount(self) -> int:
        return self._subTrackCount

    @subTrackCount.setter
    def subTrackCount(self, newSubTrackCount: int) -> None:
        self._subTrackCount = newSubTrackCount

    @property
    def fieldIndex(self) -> int:
        return self._fieldIndex

    @fieldIndex.setter
    def fieldIndex(self, newFieldIndex: int) -> None:
        self._fieldIndex = newFieldIndex

    @property
    def fieldNumber(self) -> int:
        return self._fieldIndex + 1

    '''
    //////////////////////////////
    //
    // HumAddress::getSpineInfo -- The spine path of the token: "1" for spine 1
    //     with no sub-spines, "(1)a"/"(1)b" after a *^, "((1)a)b" for the
    //     right half of a split of the left half, "1 2" after a *v merge.
    '''
    @property
    def spineInfo(self) -> str:
        return self._spineInfo

    @spineInfo.setter
    def spineInfo(self, newSpineInfo: str) -> None:
        self._spineInfo = newSpineInfo

    @property
    def ownerLine(self):  # -> t.Optional[HumdrumLine]
        return self._ownerLine

    @ownerLine.setter
    def ownerLine(self, newOwnerLine) -> None:  # newOwnerLine: t.Optional[HumdrumLine]
        self._ownerLine = newOwnerLine
        self._dataTypeTokenCached = None

    '''
    //////////////////////////////
    //
    // HumAddress::getDataType -- Return the exclusive interpretation token
    //    (e.g. **kern) that started the token's track.  If there is no such
    //    token, an empty token is returned, so clients can always ask for .text
    '''
    @property
    def dataType(self):  # -> HumdrumToken
        if self._dataTypeTokenCached is not None:
            return self._dataTypeTokenCached

        from humcore21.humdrum import HumdrumToken
        if self._ownerLine is None or self._track is None:
            return HumdrumToken('')

        tok = self._ownerLine.trackStart(self._track)
        if tok is None:
            return HumdrumToken('')

        self._dataTypeTokenCached = tok
        return tok

    '''
    //////////////////////////////
    //
    // HumAddress::getTrackString -- Return the track and subtrack as a string
    //      ("3" or "3.2").  The subtrack is left off if it is zero.
    '''
    def getTrackString(self, separator: str = '.') -> str:
        if self.subTrack > 0:
            return str(self._track) + separator + str(self.subTrack)
        return str(self._track)

    @property
    def trackString(self) -> str:
        return self.getTrackString()
