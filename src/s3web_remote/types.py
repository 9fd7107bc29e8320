"""Data types shared between the host and the s3web provider."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, NamedTuple, Optional


class RemoteOperationType(str, Enum):
    PULL = "PULL"
    PUSH = "PUSH"


class RemoteProgress(str, Enum):
    """Progress events reported back to the host during an operation."""

    START = "START"
    PROGRESS = "PROGRESS"
    END = "END"
    MESSAGE = "MESSAGE"


ProgressCallback = Callable[[RemoteProgress, Optional[str], Optional[int]], None]


def _ignore_progress(progress: RemoteProgress, message: Optional[str], percent: Optional[int]) -> None:
    pass


@dataclass(frozen=True)
class CommitRecord:
    """A single commit entry from the remote manifest."""

    id: str
    properties: Dict[str, Any]

    @property
    def timestamp(self) -> Optional[str]:
        value = self.properties.get("timestamp")
        return value if isinstance(value, str) else None

    @property
    def tags(self) -> Dict[str, Any]:
        value = self.properties.get("tags")
        return value if isinstance(value, dict) else {}


@dataclass
class RemoteOperation:
    """
    A host-driven pull or push against a remote.

    The host constructs this and passes it to every lifecycle call of the
    operation. Providers only read it.
    """

    remote: Dict[str, Any]
    commit_id: str
    type: RemoteOperationType
    operation_id: str = ""
    parameters: Dict[str, Any] = field(default_factory=dict)
    commit: Optional[Dict[str, Any]] = None
    data: Any = None
    update_progress: ProgressCallback = _ignore_progress


class ConnectionInfo(NamedTuple):
    """Authority and path components of a locator."""

    username: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[str]
    path: Optional[str]
