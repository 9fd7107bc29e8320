"""Exception types raised by the s3web remote provider."""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a provider failure, usable without matching on exception type."""

    INVALID_ARGUMENT = "invalid_argument"
    REMOTE_IO = "remote_io"
    NOT_SUPPORTED = "not_supported"


class S3WebRemoteError(Exception):
    """Base class for all provider errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(S3WebRemoteError, ValueError):
    """Malformed locator, or an unknown, missing or extra property key."""

    kind = ErrorKind.INVALID_ARGUMENT


class RemoteIOError(S3WebRemoteError, IOError):
    """A remote resource could not be fetched."""

    kind = ErrorKind.REMOTE_IO

    def __init__(self, url: str, status_code: int):
        super().__init__(f"failed to get {url}, error code {status_code}")
        self.url = url
        self.status_code = status_code


class NotSupportedError(S3WebRemoteError, NotImplementedError):
    """The requested operation is not available on a read-only remote."""

    kind = ErrorKind.NOT_SUPPORTED
