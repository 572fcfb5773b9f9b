"""Filename decoding utilities for ZIP archives.

This module turns the raw name bytes of an archive entry into text, using
the encoding selector to pick a codec and falling back through the usual
legacy encodings so that a name is always produced.
"""

import logging
import zipfile
from typing import Optional, Tuple

from .charsets import Encoding, fallback_encodings
from .detection import Detector, detect_encoding
from .exceptions import DetectionError
from .header import is_utf8_filename

logger = logging.getLogger(__name__)

# zipfile decodes names without the UTF-8 flag with this code page
ZIP_LEGACY_CODEC = "cp437"


def raw_filename(info: zipfile.ZipInfo) -> bytes:
    """
    Recover the filename bytes as stored in the archive.

    zipfile decodes names without the UTF-8 flag as cp437, which maps every
    byte to a distinct character, so encoding back with cp437 is lossless.
    """
    if is_utf8_filename(info):
        return info.orig_filename.encode("utf-8")
    return info.orig_filename.encode(ZIP_LEGACY_CODEC)


def decode_filename_with_encoding(
    data: bytes, encoding: Optional[Encoding] = None, detector: Optional[Detector] = None
) -> Tuple[str, Optional[Encoding]]:
    """
    Decode raw filename bytes to text and report which encoding did it.

    Args:
        data: Raw filename bytes
        encoding: Encoding to use; detected from the bytes if None
        detector: Optional detector passed through to detect_encoding

    Returns:
        Tuple of (decoded filename, encoding that decoded it cleanly). The
        encoding is None when no codec fits and the name was decoded with
        replacement characters.
    """
    if not data:
        return "", Encoding.PASSTHROUGH

    if encoding is None:
        try:
            encoding = detect_encoding(data, detector=detector)
        except DetectionError as e:
            logger.warning("Could not detect filename encoding: %s", e)

    if encoding is not None:
        try:
            return encoding.decode(data), encoding
        except UnicodeDecodeError:
            logger.debug("Filename does not decode as %s, trying fallbacks", encoding.name)

    for candidate in fallback_encodings():
        if candidate is encoding:
            continue
        try:
            return candidate.decode(data), candidate
        except UnicodeDecodeError:
            continue

    # Never fail to return a name, even for corrupted data
    return data.decode(Encoding.PASSTHROUGH.codec, errors="replace"), None


def decode_filename(
    data: bytes, encoding: Optional[Encoding] = None, detector: Optional[Detector] = None
) -> str:
    """
    Decode raw filename bytes to text.

    Same as ``decode_filename_with_encoding`` but returns only the name.
    """
    name, _ = decode_filename_with_encoding(data, encoding=encoding, detector=detector)
    return name


def recover_filename(
    info: zipfile.ZipInfo, encoding: Optional[Encoding] = None, detector: Optional[Detector] = None
) -> str:
    """
    Return the correctly decoded name of an archive entry.

    Entries flagged as UTF-8 are returned as zipfile decoded them; others are
    reinterpreted from their raw bytes.
    """
    if is_utf8_filename(info):
        return info.filename
    return decode_filename(raw_filename(info), encoding=encoding, detector=detector)
