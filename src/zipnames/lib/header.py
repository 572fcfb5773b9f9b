"""UTF-8 flag handling for ZIP entry headers.

From the PKWARE APPNOTE, general purpose bit flag:
    Bit 11: Language encoding flag (EFS). If this bit is set, the filename
            and comment fields for this file MUST be encoded using UTF-8.
"""

from collections.abc import Mapping
from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

UTF8_FLAG = 0x800


@runtime_checkable
class SupportsUTF8Flag(Protocol):
    """Anything that can say whether its filename is UTF-8 encoded."""

    @property
    def utf8_flag(self) -> bool: ...


class ArchiveEntryHeader(BaseModel):
    """
    The parts of a ZIP entry header that decide how its filename is encoded.

    Either field may be missing; ``flags`` wins when both are present, and a
    header with neither is assumed to be UTF-8.
    """

    flags: Optional[int] = Field(None, description="General purpose bit flag")
    utf8: Optional[bool] = Field(None, description="Explicit UTF-8 marker")

    @property
    def utf8_flag(self) -> bool:
        if self.flags is not None:
            return bool(self.flags & UTF8_FLAG)
        if self.utf8 is not None:
            return self.utf8
        return True


def _is_flag_value(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_utf8_filename(header: Any) -> bool:
    """
    Check whether an archive entry's filename is stored as UTF-8.

    Accepted header shapes, checked in order:
    - objects implementing ``SupportsUTF8Flag``
    - objects with a numeric ``flag_bits`` (``zipfile.ZipInfo``) or ``flags``,
      or a ``get_flags()`` method
    - objects with a boolean ``utf8`` attribute or a ``get_utf8()`` method
    - mappings with a numeric ``"flags"`` or a boolean ``"utf8"`` key

    Anything else is assumed to be UTF-8.
    """
    if isinstance(header, SupportsUTF8Flag):
        return bool(header.utf8_flag)

    for attr in ("flag_bits", "flags"):
        flags = getattr(header, attr, None)
        if _is_flag_value(flags):
            return bool(flags & UTF8_FLAG)
    get_flags = getattr(header, "get_flags", None)
    if callable(get_flags):
        flags = get_flags()
        if _is_flag_value(flags):
            return bool(flags & UTF8_FLAG)

    utf8 = getattr(header, "utf8", None)
    if isinstance(utf8, bool):
        return utf8
    get_utf8 = getattr(header, "get_utf8", None)
    if callable(get_utf8):
        return bool(get_utf8())

    if isinstance(header, Mapping):
        flags = header.get("flags")
        if _is_flag_value(flags):
            return bool(flags & UTF8_FLAG)
        utf8 = header.get("utf8")
        if isinstance(utf8, bool):
            return utf8

    return True
