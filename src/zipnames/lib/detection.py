"""Guess the encoding of raw filename bytes.

Statistical detection is delegated to chardet. Short filenames often give the
detector too little to go on, so low-confidence results are first checked
against a few byte pairs that are very common in Japanese, Korean and Chinese
legacy encodings, and finally against the fallback list.
"""

import logging
from typing import Callable, Optional, Union

import chardet
from pydantic import BaseModel, Field

from .charsets import Encoding, fallback_encodings, lookup_charset
from .exceptions import DetectionError

logger = logging.getLogger(__name__)

# Below this detector confidence the byte heuristics take precedence.
CONFIDENCE_THRESHOLD = 0.7

# Most common problematic encoding in ZIP filenames.
DEFAULT_ENCODING = Encoding.SHIFT_JIS

# Shift-JIS: hiragana, katakana and two kanji lead/trail pairs
JAPANESE_MARKERS = (b"\x82\xa0", b"\x83\x40", b"\x82\x6a", b"\x8a\xbf")
# EUC-KR hangul
KOREAN_MARKERS = (b"\xb0\xa1", b"\xb0\xfa", b"\xc7\xd1")
# GBK: common hanzi
CHINESE_MARKERS = (b"\xd6\xd0", b"\xce\xc4", b"\xd7\xd6")


class DetectionResult(BaseModel):
    """Best guess produced by a charset detector for one byte buffer."""

    charset: str = Field("", description="Detected charset label, empty if none")
    language: str = Field("", description="Language hint, empty if none")
    confidence: float = Field(0.0, ge=0.0, le=1.0, description="Detector confidence")


Detector = Callable[[bytes], DetectionResult]


def chardet_detector(data: bytes) -> DetectionResult:
    """Run chardet over ``data`` and normalise its result dictionary."""
    result = chardet.detect(data)
    return DetectionResult(
        charset=result.get("encoding") or "",
        language=result.get("language") or "",
        confidence=result.get("confidence") or 0.0,
    )


def contains_japanese_bytes(data: bytes) -> bool:
    return any(marker in data for marker in JAPANESE_MARKERS)


def contains_korean_bytes(data: bytes) -> bool:
    return any(marker in data for marker in KOREAN_MARKERS)


def contains_chinese_bytes(data: bytes) -> bool:
    return any(marker in data for marker in CHINESE_MARKERS)


def guess_from_byte_patterns(data: bytes) -> Optional[Encoding]:
    """
    Look for byte pairs typical of CJK legacy encodings.

    Japanese is checked first, then Korean, then Chinese; the first match
    wins.

    Returns:
        The matching encoding, or None if no marker is present
    """
    if contains_japanese_bytes(data):
        return Encoding.SHIFT_JIS
    if contains_korean_bytes(data):
        return Encoding.EUC_KR
    if contains_chinese_bytes(data):
        return Encoding.GBK
    return None


def detect_encoding(data: bytes, detector: Optional[Detector] = None) -> Encoding:
    """
    Determine the encoding of a raw byte buffer such as a ZIP filename.

    Args:
        data: Raw bytes to analyse
        detector: Callable returning a DetectionResult; defaults to chardet

    Returns:
        The selected encoding. Empty input and UTF-8 compatible charsets give
        ``Encoding.PASSTHROUGH``; if nothing else matches, Shift-JIS.

    Raises:
        DetectionError: If the detector itself fails
    """
    if not data:
        return Encoding.PASSTHROUGH

    detector = detector or chardet_detector
    try:
        result = detector(data)
    except Exception as e:
        raise DetectionError(f"Charset detection failed: {e}") from e

    logger.debug(
        "Detected charset %r, language %r, confidence %.2f",
        result.charset,
        result.language,
        result.confidence,
    )

    if result.confidence < CONFIDENCE_THRESHOLD:
        encoding = guess_from_byte_patterns(data)
        if encoding is not None:
            logger.debug("Low confidence, byte patterns suggest %s", encoding.name)
            return encoding

    encoding = lookup_charset(result.charset, result.language)
    if encoding is not None:
        # Western labels map to pass-through, which only holds for valid UTF-8
        if not encoding.is_passthrough or encoding.can_decode(data):
            return encoding
        logger.debug("Charset %r is not UTF-8 compatible for these bytes", result.charset)

    for candidate in fallback_encodings():
        if candidate.can_decode(data):
            logger.debug("Charset %r not recognised, %s decodes cleanly", result.charset, candidate.name)
            return candidate

    logger.debug("No encoding decodes cleanly, defaulting to %s", DEFAULT_ENCODING.name)
    return DEFAULT_ENCODING


def detect_encoding_from_text(name: Union[str, bytes]) -> Encoding:
    """
    Simplified detection for callers that have no detector output to work with.

    Anything that is valid UTF-8 passes through; everything else is assumed
    to be Shift-JIS. Never raises.
    """
    if not name:
        return Encoding.PASSTHROUGH

    try:
        if isinstance(name, str):
            # Fails only on lone surrogates, e.g. from surrogateescape decoding
            name.encode("utf-8")
        else:
            name.decode("utf-8")
    except UnicodeError:
        return DEFAULT_ENCODING
    return Encoding.PASSTHROUGH
