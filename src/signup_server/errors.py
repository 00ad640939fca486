"""Exception types raised by the connector and the signup path."""

from __future__ import annotations


class SignupServerError(Exception):
    """Base class for errors raised by signup_server."""


class DatabaseConnectionError(SignupServerError):
    """The database could not be reached at startup.

    Fatal: the listener is never started.
    """


class PersistenceError(SignupServerError):
    """A save was rejected by the database driver.

    Surfaced to the client as a 400 with the error text.
    """
