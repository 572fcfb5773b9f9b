"""Tests for byte-level and text-level encoding detection."""

import pytest
from zipnames.lib.charsets import Encoding
from zipnames.lib.detection import (
    CONFIDENCE_THRESHOLD,
    DetectionResult,
    chardet_detector,
    detect_encoding,
    detect_encoding_from_text,
    guess_from_byte_patterns,
)
from zipnames.lib.exceptions import DetectionError


def fixed_detector(charset="", language="", confidence=0.0):
    """Build a detector that always reports the given result."""
    calls = []

    def detector(data):
        calls.append(data)
        return DetectionResult(charset=charset, language=language, confidence=confidence)

    detector.calls = calls
    return detector


def failing_detector(data):
    raise ValueError("detector exploded")


def test_empty_input_is_passthrough():
    """Empty input never reaches the detector."""
    detector = fixed_detector("Shift_JIS", "ja", 1.0)
    assert detect_encoding(b"", detector=detector) is Encoding.PASSTHROUGH
    assert detector.calls == []


def test_empty_input_with_failing_detector():
    assert detect_encoding(b"", detector=failing_detector) is Encoding.PASSTHROUGH


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x82\xa0.txt", Encoding.SHIFT_JIS),
        (b"\x83\x40", Encoding.SHIFT_JIS),
        (b"\x82\x6a", Encoding.SHIFT_JIS),
        (b"\x8a\xbf", Encoding.SHIFT_JIS),
        (b"\xb0\xa1", Encoding.EUC_KR),
        (b"\xb0\xfa", Encoding.EUC_KR),
        (b"\xc7\xd1\xb1\xb9", Encoding.EUC_KR),
        (b"\xd6\xd0\xce\xc4", Encoding.GBK),
        (b"\xd7\xd6", Encoding.GBK),
    ],
)
def test_low_confidence_uses_byte_patterns(data, expected):
    """Marker byte pairs decide when the detector is unsure."""
    detector = fixed_detector("windows-1252", "", 0.3)
    assert detect_encoding(data, detector=detector) is expected


def test_byte_pattern_priority():
    """Japanese markers are checked before Korean, Korean before Chinese."""
    assert guess_from_byte_patterns(b"\xd6\xd0\xb0\xa1\x82\xa0") is Encoding.SHIFT_JIS
    assert guess_from_byte_patterns(b"\xd6\xd0\xb0\xa1") is Encoding.EUC_KR
    assert guess_from_byte_patterns(b"\xd6\xd0") is Encoding.GBK
    assert guess_from_byte_patterns(b"plain.txt") is None


def test_confident_result_skips_byte_patterns():
    """A confident detector result is trusted over the markers."""
    detector = fixed_detector("EUC-KR", "ko", 0.99)
    assert detect_encoding(b"\x82\xa0", detector=detector) is Encoding.EUC_KR


def test_threshold_is_exclusive():
    """Confidence equal to the threshold counts as confident."""
    detector = fixed_detector("Big5", "", CONFIDENCE_THRESHOLD)
    assert detect_encoding(b"\x82\xa0", detector=detector) is Encoding.BIG5


def test_low_confidence_without_markers_uses_charset():
    detector = fixed_detector("GB2312", "", 0.2)
    assert detect_encoding(b"abc", detector=detector) is Encoding.GBK


def test_utf8_charset_is_passthrough():
    detector = fixed_detector("utf-8", "", 0.99)
    assert detect_encoding("日本語.txt".encode("utf-8"), detector=detector) is Encoding.PASSTHROUGH


def test_language_hint_used_for_unknown_charset():
    detector = fixed_detector("ISO-2022-JP", "Japanese", 0.99)
    assert detect_encoding(b"abc", detector=detector) is Encoding.SHIFT_JIS


def test_unknown_charset_tries_fallbacks_in_order():
    """The first fallback encoding that decodes cleanly is chosen."""
    detector = fixed_detector("KOI8-R", "Russian", 0.99)
    assert detect_encoding("テスト".encode("shift_jis"), detector=detector) is Encoding.SHIFT_JIS
    # Only UTF-16LE accepts an even run of 0xFF bytes
    assert detect_encoding(b"\xff\xff", detector=detector) is Encoding.UTF16LE


def test_nothing_decodes_defaults_to_shift_jis():
    detector = fixed_detector("KOI8-R", "", 0.99)
    assert detect_encoding(b"\xff", detector=detector) is Encoding.SHIFT_JIS


def test_detector_without_answer():
    """A detector that gives up falls through to the fallback list."""
    detector = fixed_detector("", "", 0.0)
    assert detect_encoding(b"\xff\xff", detector=detector) is Encoding.UTF16LE


def test_detector_failure_raises_detection_error():
    with pytest.raises(DetectionError) as exc_info:
        detect_encoding(b"\x82\xa0", detector=failing_detector)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_detection_result_confidence_bounds():
    with pytest.raises(ValueError):
        DetectionResult(charset="ascii", language="", confidence=1.5)


def test_chardet_ascii_is_passthrough():
    """The default chardet detector treats plain ASCII as pass-through."""
    assert detect_encoding(b"readme.txt") is Encoding.PASSTHROUGH


def test_chardet_detector_returns_result():
    result = chardet_detector(b"readme.txt")
    assert isinstance(result, DetectionResult)
    assert 0.0 <= result.confidence <= 1.0


def test_chardet_utf8_is_passthrough():
    data = ("これは日本語で書かれたファイル名のサンプルです。" * 4).encode("utf-8")
    assert detect_encoding(data) is Encoding.PASSTHROUGH


def test_detect_encoding_is_idempotent():
    detector = fixed_detector("", "", 0.1)
    data = "中文文件.txt".encode("gbk")
    assert detect_encoding(data, detector=detector) is detect_encoding(data, detector=detector)


@pytest.mark.parametrize("name", ["", b"", "readme.txt", b"readme.txt", "日本語.txt", "日本語.txt".encode("utf-8")])
def test_text_variant_passthrough(name):
    assert detect_encoding_from_text(name) is Encoding.PASSTHROUGH


def test_text_variant_invalid_utf8_is_shift_jis():
    raw = "テスト.txt".encode("shift_jis")
    assert detect_encoding_from_text(raw) is Encoding.SHIFT_JIS
    assert detect_encoding_from_text(raw.decode("utf-8", errors="surrogateescape")) is Encoding.SHIFT_JIS


@pytest.mark.parametrize(
    "charset, data",
    [
        ("ISO-8859-1", "한국어.txt".encode("euc_kr")),
        ("Windows-1252", "résumé.txt".encode("cp1252")),
        ("ascii", "テスト.txt".encode("shift_jis")),
    ],
)
def test_confident_western_charset_on_non_utf8_bytes(charset, data):
    """A pass-through label is only trusted when the bytes are valid UTF-8."""
    detector = fixed_detector(charset, "", 0.73)
    encoding = detect_encoding(data, detector=detector)
    assert encoding is not Encoding.PASSTHROUGH
    assert encoding.can_decode(data)


def test_confident_western_charset_on_utf8_bytes():
    detector = fixed_detector("Windows-1252", "", 0.9)
    assert detect_encoding(b"readme.txt", detector=detector) is Encoding.PASSTHROUGH
