import logging

from .vlr import VLR, VLR_HEADER_SIZE
from .. import errors
from ..cursor import FieldCursor

logger = logging.getLogger(__name__)


def read_vlr_fields(cursor: FieldCursor, length_type: str):
    """Reads the header of a (E)VLR, returns its fields and the
    length of the record data following it
    """
    reserved = cursor.read("uint16")
    user_id = cursor.read_bytes(16)
    record_id = cursor.read("uint16")
    record_data_len = cursor.read(length_type)
    description = cursor.read_bytes(32)
    return (user_id, record_id, description, reserved), record_data_len


class VLRList:
    """Class responsible for managing the vlrs, in file order"""

    def __init__(self, vlrs=None):
        self.vlrs = list(vlrs) if vlrs is not None else []

    def append(self, vlr):
        self.vlrs.append(vlr)

    def get_by_id(self, user_id="", record_ids=(None,)):
        """Function to get vlrs by user_id and/or record_ids.
        Always returns a list even if only one vlr matches the user_id and record_id

        Parameters
        ----------
        user_id: str, optional
                 the user id
        record_ids: iterable of int, optional
                    THe record ids of the vlr(s) you wish to get

        Returns
        -------
        :py:class:`list`
            a list of vlrs matching the user_id and records_ids

        """
        if user_id != "" and record_ids != (None,):
            return [
                vlr
                for vlr in self.vlrs
                if vlr.user_id == user_id and vlr.record_id in record_ids
            ]
        else:
            return [
                vlr
                for vlr in self.vlrs
                if (user_id != "" and vlr.user_id == user_id)
                or vlr.record_id in record_ids
            ]

    def index(self, user_id, record_id):
        for i, v in enumerate(self.vlrs):
            if v.user_id == user_id and v.record_id == record_id:
                return i
        raise ValueError(
            "({}, {}) is not in the VLR list".format(user_id, record_id)
        )

    def __iter__(self):
        yield from iter(self.vlrs)

    def __getitem__(self, item):
        return self.vlrs[item]

    def __len__(self):
        return len(self.vlrs)

    def __eq__(self, other):
        if isinstance(other, VLRList):
            return self.vlrs == other.vlrs
        if isinstance(other, list):
            return self.vlrs == other
        return NotImplemented

    def __repr__(self):
        return "[{}]".format(", ".join(repr(vlr) for vlr in self.vlrs))

    @classmethod
    def read_from(
        cls, cursor: FieldCursor, num_to_read: int, point_data_start: int
    ) -> "VLRList":
        """Reads vlrs from the cursor position

        Parameters
        ----------
        cursor : FieldCursor
                 positioned at the first vlr
        num_to_read : int
                      number of vlrs to be read
        point_data_start : int
                      offset of the point records, no vlr may reach into them

        Raises
        ------
        RegionOverrun
            if the vlrs would cross point_data_start, the vlrs read
            before that are in the exception's `vlrs`

        Returns
        -------
        VLRList
            List of vlrs
        """
        vlrlist = cls()
        for i in range(num_to_read):
            if cursor.offset + VLR_HEADER_SIZE > point_data_start:
                raise errors.RegionOverrun(
                    "VLR {} of {} at offset {} does not fit before the start of "
                    "point records ({})".format(
                        i + 1, num_to_read, cursor.offset, point_data_start
                    ),
                    vlrlist.vlrs,
                )

            fields, record_data_len = read_vlr_fields(cursor, "uint16")
            if cursor.offset + record_data_len > point_data_start:
                raise errors.RegionOverrun(
                    "VLR {} of {} record data ({} bytes) would end at {}, past the "
                    "start of point records ({})".format(
                        i + 1,
                        num_to_read,
                        record_data_len,
                        cursor.offset + record_data_len,
                        point_data_start,
                    ),
                    vlrlist.vlrs,
                )
            record_data = cursor.read_bytes(record_data_len)
            user_id, record_id, description, reserved = fields
            vlr = VLR(user_id, record_id, description, record_data, reserved=reserved)
            logger.debug("Read {}".format(vlr))
            vlrlist.append(vlr)

        return vlrlist
