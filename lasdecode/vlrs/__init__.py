from .vlr import VLR, VLR_HEADER_SIZE, MAX_VLR_RECORD_DATA_LEN
from .vlrlist import VLRList
