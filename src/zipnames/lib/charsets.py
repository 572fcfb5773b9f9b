"""Lookup tables mapping encoding names, charset labels and languages to encodings.

Filenames inside ZIP archives that do not set the language encoding flag are
stored in whatever legacy code page the archiving tool used. This module only
selects which codec to apply; the transcoding itself is done by Python's
``codecs`` machinery.
"""

from enum import Enum
from typing import Dict, Optional, Tuple


class Encoding(Enum):
    """
    The closed set of encodings a ZIP filename can be reinterpreted with.

    The value of each member is the Python codec name. ``PASSTHROUGH`` means
    "no transformation": the bytes are UTF-8 (or ASCII/Latin-1, which are
    treated the same way) and can be used as they are.
    """

    SHIFT_JIS = "shift_jis"
    EUC_JP = "euc_jp"
    EUC_KR = "euc_kr"
    GBK = "gbk"
    BIG5 = "big5"
    # Little-endian without BOM handling, a leading BOM decodes to U+FEFF
    UTF16LE = "utf-16-le"
    PASSTHROUGH = "utf-8"

    @property
    def codec(self) -> str:
        """Python codec name used to decode bytes in this encoding."""
        return self.value

    @property
    def is_passthrough(self) -> bool:
        return self is Encoding.PASSTHROUGH

    def decode(self, data: bytes, errors: str = "strict") -> str:
        """Decode ``data`` with this encoding's codec."""
        return data.decode(self.codec, errors=errors)

    def can_decode(self, data: bytes) -> bool:
        """Return True if the whole of ``data`` decodes without error."""
        try:
            self.decode(data)
        except UnicodeDecodeError:
            return False
        return True


# Free-form names accepted from users and configuration.
# Keys are matched case-sensitively.
NAME_TABLE: Dict[str, Encoding] = {
    "shift-jis": Encoding.SHIFT_JIS,
    "shiftjis": Encoding.SHIFT_JIS,
    "sjis": Encoding.SHIFT_JIS,
    "japanese": Encoding.SHIFT_JIS,
    "euc-jp": Encoding.EUC_JP,
    "eucjp": Encoding.EUC_JP,
    "euc-kr": Encoding.EUC_KR,
    "euckr": Encoding.EUC_KR,
    "korean": Encoding.EUC_KR,
    "gbk": Encoding.GBK,
    "gb18030": Encoding.GBK,
    "gb2312": Encoding.GBK,
    "simplified-chinese": Encoding.GBK,
    "big5": Encoding.BIG5,
    "traditional-chinese": Encoding.BIG5,
    "utf-16le": Encoding.UTF16LE,
    "windows": Encoding.UTF16LE,
    "utf-8": Encoding.PASSTHROUGH,
    "utf8": Encoding.PASSTHROUGH,
}

# Charset labels as reported by charset detectors.
# SHIFT_JIS, Windows-1252, ISO-8859-1 and utf-8 are chardet's spellings.
CHARSET_TABLE: Dict[str, Encoding] = {
    "Shift_JIS": Encoding.SHIFT_JIS,
    "SHIFT_JIS": Encoding.SHIFT_JIS,
    "SJIS": Encoding.SHIFT_JIS,
    "shift-jis": Encoding.SHIFT_JIS,
    "sjis": Encoding.SHIFT_JIS,
    "EUC-JP": Encoding.EUC_JP,
    "eucjp": Encoding.EUC_JP,
    "EUC-KR": Encoding.EUC_KR,
    "euckr": Encoding.EUC_KR,
    "GB18030": Encoding.GBK,
    "GBK": Encoding.GBK,
    "GB2312": Encoding.GBK,
    "gb18030": Encoding.GBK,
    "gbk": Encoding.GBK,
    "gb2312": Encoding.GBK,
    "Big5": Encoding.BIG5,
    "big5": Encoding.BIG5,
    "UTF-16": Encoding.UTF16LE,
    "utf-16": Encoding.UTF16LE,
    "UTF-16LE": Encoding.UTF16LE,
    "utf-16le": Encoding.UTF16LE,
    # Western code pages are close enough to UTF-8 handling for filenames
    "windows-1252": Encoding.PASSTHROUGH,
    "Windows-1252": Encoding.PASSTHROUGH,
    "iso-8859-1": Encoding.PASSTHROUGH,
    "ISO-8859-1": Encoding.PASSTHROUGH,
    # ASCII is a subset of UTF-8
    "ASCII": Encoding.PASSTHROUGH,
    "US-ASCII": Encoding.PASSTHROUGH,
    "ascii": Encoding.PASSTHROUGH,
    "UTF-8": Encoding.PASSTHROUGH,
    "utf-8": Encoding.PASSTHROUGH,
    "utf8": Encoding.PASSTHROUGH,
}

# Consulted only when the charset label is not recognised.
# ISO 639-1/639-2 codes, plus the English names chardet reports.
LANGUAGE_TABLE: Dict[str, Encoding] = {
    "ja": Encoding.SHIFT_JIS,
    "jpn": Encoding.SHIFT_JIS,
    "Japanese": Encoding.SHIFT_JIS,
    "ko": Encoding.EUC_KR,
    "kor": Encoding.EUC_KR,
    "Korean": Encoding.EUC_KR,
    "zh": Encoding.GBK,
    "zho": Encoding.GBK,
    "Chinese": Encoding.GBK,
}

# Order is a prior on which legacy encodings are most likely in ZIP filenames.
FALLBACK_ENCODINGS: Tuple[Encoding, ...] = (
    Encoding.SHIFT_JIS,
    Encoding.GBK,
    Encoding.EUC_KR,
    Encoding.BIG5,
    Encoding.EUC_JP,
    Encoding.UTF16LE,
)


def encoding_by_name(name: str) -> Encoding:
    """
    Resolve a free-form encoding name such as ``"sjis"`` or ``"gbk"``.

    Args:
        name: Case-sensitive token, see ``NAME_TABLE``

    Returns:
        The matching encoding, or ``Encoding.PASSTHROUGH`` for UTF-8 and
        for names that are not recognised
    """
    return NAME_TABLE.get(name, Encoding.PASSTHROUGH)


def lookup_charset(charset: Optional[str], language: Optional[str] = None) -> Optional[Encoding]:
    """
    Resolve a detector's charset label, falling back to its language hint.

    Unlike ``encoding_from_charset`` this returns None when neither table
    matches, so that an unresolved result can be told apart from a label
    that is known to need no transformation.
    """
    if charset and charset in CHARSET_TABLE:
        return CHARSET_TABLE[charset]
    if language and language in LANGUAGE_TABLE:
        return LANGUAGE_TABLE[language]
    return None


def encoding_from_charset(charset: Optional[str], language: Optional[str] = None) -> Encoding:
    """
    Resolve a charset label as produced by a detector (e.g. ``"Shift_JIS"``).

    The charset table is checked first; if the label is not listed, the
    language code (``"ja"``, ``"ko"``, ``"zh"`` and their 3-letter forms)
    decides. Anything else is treated as pass-through.
    """
    encoding = lookup_charset(charset, language)
    if encoding is None:
        return Encoding.PASSTHROUGH
    return encoding


def fallback_encodings() -> Tuple[Encoding, ...]:
    """Encodings to try, in order, when charset and language resolution fail."""
    return FALLBACK_ENCODINGS
