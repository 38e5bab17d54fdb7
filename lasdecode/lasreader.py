import logging
from typing import Optional

from . import errors
from .cursor import FieldCursor
from .evlrs import EVLRList
from .header import LasHeader
from .lasdata import LasData
from .point import PointFormat, check_point_format_id
from .point.record import PointRecord
from .vlrs import VLRList

logger = logging.getLogger(__name__)


class LasReader:
    """Decodes the LAS content of an in-memory buffer.

    The header is decoded and its point format validated on construction,
    the other parts are decoded by the read_* methods.
    """

    def __init__(self, buffer):
        self.cursor = FieldCursor(buffer)
        self.header = LasHeader.read_from(self.cursor)
        check_point_format_id(self.header.point_format_id)
        logger.info("point format: {}".format(self.header.point_format_id))
        self.diagnostics = []

    def read_vlrs(self) -> VLRList:
        """Reads the VLRs that are between the header and the points.

        When they do not fit before the points a RegionOverrun
        is added to the diagnostics and the VLRs read up to there are returned.
        """
        logger.info("number of vlrs: {}".format(self.header.number_of_vlr))
        self.cursor.seek(self.header.header_size)
        try:
            return VLRList.read_from(
                self.cursor,
                self.header.number_of_vlr,
                self.header.offset_to_point_data,
            )
        except errors.RegionOverrun as e:
            logger.warning(str(e))
            self.diagnostics.append(e)
            return VLRList(e.vlrs)

    def read_points(self) -> PointRecord:
        point_format = PointFormat(self.header.point_format_id)
        point_count = self.header.point_count
        logger.info("number of points: {}".format(point_count))
        return PointRecord.from_buffer(
            self.cursor,
            point_format,
            point_count,
            self.header.offset_to_point_data,
            self.header.point_data_record_length,
        )

    def read_evlrs(self) -> Optional[EVLRList]:
        """Reads the EVLRs, returns None if the file version
        does not support evlrs
        """
        if not self.header.has_extended_fields:
            return None
        logger.info("number of evlrs: {}".format(self.header.number_of_evlr))
        if self.header.number_of_evlr == 0:
            return EVLRList()
        self.cursor.seek(self.header.start_of_first_evlr)
        return EVLRList.read_from(self.cursor, self.header.number_of_evlr)

    def read(self, point_data_only: bool = True) -> LasData:
        """Reads the points and, when point_data_only is False, the (E)VLRs"""
        vlrs, evlrs = None, None
        if not point_data_only:
            vlrs = self.read_vlrs()
        points = self.read_points()
        if not point_data_only:
            evlrs = self.read_evlrs()

        return LasData(
            header=self.header,
            points=points,
            vlrs=vlrs,
            evlrs=evlrs,
            diagnostics=list(self.diagnostics),
        )
