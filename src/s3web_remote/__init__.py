"""Read-only s3web remote provider for published commit repositories."""

from .base import RemoteClient, RemoteServer
from .client import PROVIDER_NAME, S3WebRemoteClient
from .config import HttpSettings, load_http_settings
from .errors import (
    ErrorKind,
    InvalidArgumentError,
    NotSupportedError,
    RemoteIOError,
    S3WebRemoteError,
)
from .factory import create_remote_client, create_remote_server
from .server import GateDecision, S3WebRemoteServer, check_operation
from .types import CommitRecord, RemoteOperation, RemoteOperationType, RemoteProgress

__all__ = [
    "PROVIDER_NAME",
    "RemoteClient",
    "RemoteServer",
    "S3WebRemoteClient",
    "S3WebRemoteServer",
    "HttpSettings",
    "load_http_settings",
    "ErrorKind",
    "S3WebRemoteError",
    "InvalidArgumentError",
    "RemoteIOError",
    "NotSupportedError",
    "create_remote_client",
    "create_remote_server",
    "GateDecision",
    "check_operation",
    "CommitRecord",
    "RemoteOperation",
    "RemoteOperationType",
    "RemoteProgress",
]
