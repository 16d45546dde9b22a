"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class SessionTokenError(UtilError):
    """Session token could not be verified."""

    pass
