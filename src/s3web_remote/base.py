"""Abstract provider interfaces implemented by every remote type."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .types import CommitRecord, RemoteOperation
from .util import TagFilter


class RemoteClient(ABC):
    """Client-side half of a provider: translates between locators and properties."""

    @abstractmethod
    def get_provider(self) -> str:
        """Name the provider is registered under; also the locator scheme."""

    @abstractmethod
    def parse_uri(self, uri: str, additional_properties: Mapping[str, str]) -> Dict[str, Any]:
        """Convert a locator plus extra user-supplied properties to remote properties."""

    @abstractmethod
    def to_uri(self, properties: Mapping[str, Any]) -> Tuple[str, Dict[str, str]]:
        """Convert remote properties back to a locator and its extra properties."""

    @abstractmethod
    def get_parameters(self, remote_properties: Mapping[str, Any]) -> Dict[str, Any]:
        """Return per-operation parameters for a remote."""


class RemoteServer(ABC):
    """Server-side half of a provider: queries commits and moves archives."""

    @abstractmethod
    def get_provider(self) -> str:
        """Name the provider is registered under."""

    @abstractmethod
    def validate_remote(self, remote: Mapping[str, Any]) -> Mapping[str, Any]:
        """Check remote properties, returning them unchanged if valid."""

    @abstractmethod
    def validate_parameters(self, parameters: Mapping[str, Any]) -> Mapping[str, Any]:
        """Check operation parameters, returning them unchanged if valid."""

    @abstractmethod
    def list_commits(
        self,
        remote: Mapping[str, Any],
        parameters: Mapping[str, Any],
        tags: Sequence[TagFilter],
    ) -> List[CommitRecord]:
        """List commits matching every tag filter, newest first."""

    @abstractmethod
    def get_commit(
        self,
        remote: Mapping[str, Any],
        parameters: Mapping[str, Any],
        commit_id: str,
    ) -> Optional[Dict[str, Any]]:
        """Return the properties of a single commit, or None if it does not exist."""

    @abstractmethod
    def start_operation(self, operation: RemoteOperation) -> Any:
        """Begin an operation. The return value is opaque to the host."""

    @abstractmethod
    def end_operation(self, operation: RemoteOperation, is_successful: bool) -> None:
        """Finish an operation, releasing anything acquired in start_operation."""

    @abstractmethod
    def pull_archive(self, operation: RemoteOperation, volume: str, archive: Path) -> None:
        """Download the archive for *volume* of the operation's commit into *archive*."""

    @abstractmethod
    def push_archive(self, operation: RemoteOperation, volume: str, archive: Path) -> None:
        """Upload the archive for *volume* of the operation's commit from *archive*."""

    @abstractmethod
    def push_metadata(
        self,
        operation: RemoteOperation,
        commit: Mapping[str, Any],
        is_update: bool,
    ) -> None:
        """Publish commit metadata to the remote."""
