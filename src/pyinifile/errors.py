class IniFileError(Exception):
    """Base class for pyinifile errors."""


class IniIOError(IniFileError):
    """Raised when a line source cannot be read or a sink cannot be written."""


class IniFormatError(IniFileError):
    """Raised when a document cannot be serialised as INI sections."""


class UnknownBackendError(IniFileError):
    """Raised when a backend name is not registered."""
