"""Core monoclass exceptions."""

__all__ = ['MonoclassError', 'APIError', 'InvalidNameError', 'InvalidBaseError',
           'InvalidMemberGroupError', 'ReservedNameError', 'ProtocolError']


class MonoclassError(Exception):
    """Base exception for monoclass package errors.

    Users should be able to use this base class to catch errors
    emitted by monoclass.
    """


class APIError(MonoclassError):
    """Specified interfaces are being violated."""


class InvalidNameError(APIError):
    """A class name is not a non-empty string."""


class InvalidBaseError(APIError):
    """A base class was not produced by the same factory lineage."""


class InvalidMemberGroupError(APIError):
    """A member group passed to ``define`` is not a mapping of names to values.

    The 1-based position of the group is available as *position*.
    """
    def __init__(self, message: str, position: int = None):
        super().__init__(message)
        self.position = position


class ReservedNameError(APIError):
    """A member or static attribute would shadow a reserved name."""


class ProtocolError(MonoclassError):
    """A behavioral protocol has not been followed correctly."""
