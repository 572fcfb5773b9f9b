"""ZIP archive reader that lists entries under their recovered filenames."""

import logging
import zipfile
from typing import List, Optional

from pydantic import BaseModel, Field

from .charsets import NAME_TABLE, Encoding
from .detection import detect_encoding
from .exceptions import DetectionError, InvalidArchiveError
from .header import is_utf8_filename
from .text_utils import decode_filename_with_encoding, raw_filename

logger = logging.getLogger(__name__)


class ArchiveEntry(BaseModel):
    """
    A single member of a ZIP archive.

    ``original_name`` is what zipfile reports, ``name`` the filename after
    reinterpreting its raw bytes with ``encoding``.
    """

    original_name: str = Field(..., description="Name as decoded by zipfile")
    name: str = Field(..., description="Recovered filename")
    raw_name: bytes = Field(..., description="Filename bytes stored in the archive")
    utf8: bool = Field(..., description="True if the UTF-8 flag (bit 11) is set")
    encoding: Optional[str] = Field(None, description="Encoding that decoded the name, None if none fit")
    flag_bits: int = Field(..., description="General purpose bit flag")
    file_size: int = Field(..., description="Uncompressed size in bytes")
    compress_size: int = Field(..., description="Compressed size in bytes")
    is_dir: bool = False


class ArchiveListing(BaseModel):
    """
    Reads the central directory of a ZIP file and recovers entry names.

    Args:
        filepath: Path to the ZIP archive
        encoding: Optional encoding name (see ``encoding_by_name``) forced on
                  every entry without the UTF-8 flag. ``utf-8`` forces
                  pass-through; unknown names are ignored with a warning
                  and each entry is detected on its own.
    """

    filepath: str
    encoding: Optional[str] = None
    entries: List[ArchiveEntry] = []

    def __init__(self, filepath: str, **data):
        super().__init__(filepath=filepath, **data)
        self.parse()

    @property
    def forced_encoding(self) -> Optional[Encoding]:
        """Encoding named by ``encoding``, or None to detect per entry."""
        if not self.encoding:
            return None
        return NAME_TABLE.get(self.encoding)

    def parse(self):
        """Reads the archive and builds the entry list."""
        if self.encoding and self.forced_encoding is None:
            logger.warning("Unknown encoding name %r, detecting each filename instead", self.encoding)

        try:
            with zipfile.ZipFile(self.filepath) as archive:
                infos = archive.infolist()
        except zipfile.BadZipFile as e:
            raise InvalidArchiveError(f"Not a valid ZIP archive: {self.filepath}: {e}") from e
        except OSError as e:
            raise InvalidArchiveError(f"Cannot read archive: {self.filepath}: {e}") from e

        self.entries = [self._parse_entry(info) for info in infos]
        logger.debug("Read %d entries from %s", len(self.entries), self.filepath)

    def _parse_entry(self, info: zipfile.ZipInfo) -> ArchiveEntry:
        utf8 = is_utf8_filename(info)
        raw = raw_filename(info)

        if utf8:
            encoding = Encoding.PASSTHROUGH
            name = info.filename
        else:
            encoding = self.forced_encoding
            if encoding is None:
                try:
                    encoding = detect_encoding(raw)
                except DetectionError as e:
                    logger.warning("Could not detect encoding of %r: %s", info.filename, e)
            name, encoding = decode_filename_with_encoding(raw, encoding=encoding)

        return ArchiveEntry(
            original_name=info.filename,
            name=name,
            raw_name=raw,
            utf8=utf8,
            encoding=encoding.name if encoding is not None else None,
            flag_bits=info.flag_bits,
            file_size=info.file_size,
            compress_size=info.compress_size,
            is_dir=info.is_dir(),
        )

    def names(self) -> List[str]:
        """Recovered names of all entries, in archive order."""
        return [entry.name for entry in self.entries]
