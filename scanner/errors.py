"""Exceptions raised by fileref."""


class FileRefError(Exception):
    """Base class for errors raised by fileref."""


class CapabilityError(FileRefError):
    """Raised when the filesystem capability itself fails during resolution.

    A file that simply does not exist is not an error; see ``Resolution.found``.
    """


class SettingsError(FileRefError):
    """Raised when a configuration file cannot be read or parsed."""
