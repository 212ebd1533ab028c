"""
Exception hierarchy for beepboop.

Validation errors are raised before any check runs and abort the program with
a usage exit code. Check errors are raised by a single check attempt; they are
recoverable and feed into retry accounting. Cancellation is never wrapped: it
always travels as asyncio.CancelledError.
"""


class BeepboopError(Exception):
    """Base class for every error raised by beepboop."""


class ValidationError(BeepboopError, ValueError):
    """Raised when the target, mode or expected statuses are not acceptable."""


class InvalidTargetError(ValidationError):
    pass


class ModeTargetMismatchError(ValidationError):
    pass


class UnsupportedModeError(ValidationError):
    pass


class InvalidStatusCodeError(ValidationError):
    pass


class UsageError(BeepboopError, ValueError):
    """Raised when command-line flags fail validation."""


class CheckError(BeepboopError):
    """Raised when a single check attempt could not produce an up/down answer."""


class TransportError(CheckError):
    """DNS, connection, timeout or redirect-limit failure on the HTTP path."""


class PingSubprocessError(CheckError):
    """The ping utility could not be started or run to completion."""
