"""dta-utils custom exceptions."""

from pyteomics.auxiliary import PyteomicsError


class DtaError(PyteomicsError):
    """Base class for errors raised while indexing or reading DTA data."""

    def __init__(self, msg, *values):
        super().__init__(msg, *values)
        # OSError subclasses leave args empty when __init__ is overridden
        self.args = (msg,) + values

    def __str__(self):
        return str(self.message)


class SourceUnreadableError(DtaError, OSError):
    """Exception raised when a DTA source cannot be opened or scanned."""


class InvalidIdentifierError(DtaError, TypeError):
    """Exception raised when a spectrum identifier has the wrong kind for the source."""


class SpectrumNotFoundError(DtaError, KeyError):
    """Exception raised when a spectrum identifier is not present in the source."""


class TruncatedReadError(DtaError, OSError):
    """Exception raised when fewer bytes than indexed could be read."""

    def __init__(self, message, expected=0, actual=0):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DtaDecodeError(DtaError, ValueError):
    """Exception raised when spectrum text does not follow the DTA layout."""


class UnsupportedOperationError(DtaError, NotImplementedError):
    """Exception raised when trying to modify a source through its iterator."""
