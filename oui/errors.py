from __future__ import annotations


class OuiError(Exception):
    """Base class for every failure surfaced by the ``oui`` command."""

    exit_code = 1


class UsageError(OuiError):
    exit_code = 2


class InvalidLength(OuiError):
    pass


class TableUnavailable(OuiError):
    pass


class ParseError(OuiError):
    pass


class EnvError(OuiError):
    pass
