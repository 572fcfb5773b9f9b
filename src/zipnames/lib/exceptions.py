"""Custom exceptions for the zipnames library."""


class ZipNamesError(Exception):
    """Base class for exceptions in this module."""

    pass


class DetectionError(ZipNamesError):
    """Raised when the statistical charset detector fails on its input."""

    pass


class InvalidArchiveError(ZipNamesError):
    """Raised when the file is not a valid ZIP archive."""

    pass
