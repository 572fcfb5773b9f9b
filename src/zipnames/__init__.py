"""
zipnames - recover legacy-encoded filenames in ZIP archives

Selects the text encoding of ZIP entry names that were written without the
UTF-8 flag, so Shift-JIS, GBK, EUC-KR, Big5 and UTF-16 names display
correctly.
"""

from .lib.charsets import Encoding, encoding_by_name, encoding_from_charset, fallback_encodings
from .lib.detection import detect_encoding, detect_encoding_from_text
from .lib.header import is_utf8_filename
from .lib.archive import ArchiveListing
from .lib.exceptions import ZipNamesError, DetectionError, InvalidArchiveError

__version__ = "0.0.1"

__all__ = [
    "Encoding",
    "encoding_by_name",
    "encoding_from_charset",
    "fallback_encodings",
    "detect_encoding",
    "detect_encoding_from_text",
    "is_utf8_filename",
    "ArchiveListing",
    "ZipNamesError",
    "DetectionError",
    "InvalidArchiveError",
]
