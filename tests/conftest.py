"""Shared fixtures for building ZIP archives with legacy-encoded names."""

import zipfile
import pytest


def write_zip(path, entries):
    """
    Write a ZIP file whose entries are (name, content) pairs.

    ``str`` names are written normally, so non-ASCII ones get the UTF-8 flag.
    ``bytes`` names are stored raw without the flag, the way legacy archivers
    write Shift-JIS or GBK names. zipfile always flags non-ASCII names, so
    those entries are written under an ASCII placeholder of the same length
    that is patched afterwards.
    """
    patches = []
    with zipfile.ZipFile(path, "w") as zf:
        for index, (name, content) in enumerate(entries):
            if isinstance(name, bytes):
                placeholder = str(index).rjust(len(name), "~").encode("ascii")
                patches.append((placeholder, name))
                zf.writestr(placeholder.decode("ascii"), content)
            else:
                zf.writestr(name, content)

    data = path.read_bytes()
    for placeholder, name in patches:
        data = data.replace(placeholder, name)
    path.write_bytes(data)
    return path


@pytest.fixture
def make_zip(tmp_path):
    """Factory fixture returning the path of a freshly written ZIP file."""

    def _make_zip(entries, filename="test.zip"):
        return write_zip(tmp_path / filename, entries)

    return _make_zip
