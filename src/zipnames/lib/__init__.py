"""
zipnames.lib - Core library components

Encoding selection, UTF-8 flag handling and archive reading.
"""

from .charsets import Encoding, encoding_by_name, encoding_from_charset, fallback_encodings, lookup_charset
from .detection import DetectionResult, chardet_detector, detect_encoding, detect_encoding_from_text
from .header import ArchiveEntryHeader, SupportsUTF8Flag, is_utf8_filename
from .text_utils import decode_filename, decode_filename_with_encoding, raw_filename, recover_filename
from .archive import ArchiveEntry, ArchiveListing
from .exceptions import ZipNamesError, DetectionError, InvalidArchiveError

__all__ = [
    "Encoding",
    "encoding_by_name",
    "encoding_from_charset",
    "lookup_charset",
    "fallback_encodings",
    "DetectionResult",
    "chardet_detector",
    "detect_encoding",
    "detect_encoding_from_text",
    "ArchiveEntryHeader",
    "SupportsUTF8Flag",
    "is_utf8_filename",
    "decode_filename",
    "decode_filename_with_encoding",
    "raw_filename",
    "recover_filename",
    "ArchiveEntry",
    "ArchiveListing",
    "ZipNamesError",
    "DetectionError",
    "InvalidArchiveError",
]
