"""Exceptions raised by oracle backends.

Verifiers translate these into outcomes; they never escape a
verification run.
"""


class OracleError(Exception):
    """The backend answered, but with a failure other than not-found."""


class OracleUnavailableError(OracleError):
    """The backend tool or API is missing or refusing work (rate limit).

    Absence of a verification capability is not evidence of a broken
    reference, so callers report this as a warning.
    """
