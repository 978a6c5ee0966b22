"""Common exception types for fluidtransport correlations."""

class MissingTransportData(RuntimeError):
    """Raised when a correlation block or state quantity required by a routine is absent."""


class MixtureNotSupported(RuntimeError):
    """Raised when a pure-fluid correlation is evaluated for a multi-component state."""
