import logging

from .cursor import FieldCursor
from .vlrs.vlr import VLR
from .vlrs.vlrlist import VLRList, read_vlr_fields

logger = logging.getLogger(__name__)

EVLR_HEADER_SIZE = 60


class EVLR(VLR):
    """Extended VLR, its record data length is stored on 64 bits
    so there is no upper limit on it
    """

    max_record_data_len = None
    header_size = EVLR_HEADER_SIZE


class EVLRList(VLRList):
    @classmethod
    def read_from(
        cls, cursor: FieldCursor, num_to_read: int, point_data_start: int = None
    ) -> "EVLRList":
        """Reads `num_to_read` evlrs from the cursor position,
        which should be the start of the first evlr as given in the header

        EVLRs are stored after the point records, point_data_start
        is accepted for compatibility with VLRList.read_from and not used.
        """
        evlr_list = cls()
        for _ in range(num_to_read):
            fields, record_data_len = read_vlr_fields(cursor, "uint64")
            user_id, record_id, description, reserved = fields
            evlr = EVLR(
                user_id,
                record_id,
                description,
                cursor.read_bytes(record_data_len),
                reserved=reserved,
            )
            logger.debug("Read {}".format(evlr))
            evlr_list.append(evlr)

        return evlr_list
