"""
Read-only catalog and archive fetcher for s3web remotes.

The s3web provider reads repositories published by the S3 provider over plain
HTTP, so public demo data can be consumed without any cloud credentials. The
base URL may point anywhere the bucket is served from, including a CDN:

    http://demo.titan-data.io/hello-world/postgres

The layout is the one the S3 provider writes:

    <url>/titan                         newline-delimited JSON, one commit per line
    <url>/<commit>/<volume>.tar.gz      one archive per volume of each commit

There is no other index, so every listing or lookup refetches the manifest.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, ContextManager, Dict, List, Mapping, Optional, Sequence

import httpx

from .base import RemoteServer
from .client import PROVIDER_NAME
from .config import HttpSettings, S3WebParameters, S3WebRemoteProperties, validate_model
from .errors import NotSupportedError, RemoteIOError
from .transport import CHUNK_SIZE, HttpTransport
from .types import CommitRecord, RemoteOperation, RemoteOperationType, RemoteProgress
from .util import TagFilter, match_tags, sort_descending

log = logging.getLogger(__name__)

MANIFEST_PATH = "titan"
PUSH_NOT_SUPPORTED = "push operations are not supported with s3web remotes"


class GateDecision(str, Enum):
    """Outcome of checking whether an operation type may run against this remote."""

    OK = "ok"
    NOT_SUPPORTED = "not_supported"


def check_operation(operation_type: RemoteOperationType) -> GateDecision:
    """Only pulls are allowed; anything else is refused."""
    if operation_type == RemoteOperationType.PULL:
        return GateDecision.OK
    return GateDecision.NOT_SUPPORTED


class S3WebRemoteServer(RemoteServer):
    def __init__(
        self,
        settings: Optional[HttpSettings] = None,
        transport: Optional[HttpTransport] = None,
    ):
        self._transport = transport or HttpTransport(settings=settings)

    def get_provider(self) -> str:
        return PROVIDER_NAME

    def validate_remote(self, remote: Mapping[str, Any]) -> Mapping[str, Any]:
        """s3web remotes have a single required property, "url"."""
        validate_model(S3WebRemoteProperties, remote, "remote")
        return remote

    def validate_parameters(self, parameters: Mapping[str, Any]) -> Mapping[str, Any]:
        """s3web parameters must always be empty."""
        validate_model(S3WebParameters, parameters, "parameter")
        return parameters

    def get_file(self, remote: Mapping[str, Any], path: str) -> ContextManager[httpx.Response]:
        """Open a streaming GET for *path* relative to the remote's base URL."""
        return self._transport.get(self._resolve(remote, path))

    def get_all_commits(self, remote: Mapping[str, Any]) -> List[CommitRecord]:
        """
        Fetch and parse the manifest.

        The manifest is the only source of commit metadata, so it serves both
        listing and single-commit lookups. A missing manifest means nothing has
        been published yet and yields an empty list.
        """
        url = self._resolve(remote, MANIFEST_PATH)
        with self.get_file(remote, MANIFEST_PATH) as response:
            if response.status_code == httpx.codes.NOT_FOUND:
                log.debug("No manifest at %s", url)
                return []
            if not response.is_success:
                raise RemoteIOError(url, response.status_code)
            response.read()
            body = response.text

        commits = list(self._parse_manifest(body, url))
        log.debug("Read %d commits from %s", len(commits), url)
        return commits

    @staticmethod
    def _parse_manifest(body: str, url: str):
        for line_number, line in enumerate(body.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError as e:
                log.warning("Skipping unparseable manifest line %d in %s: %s", line_number, url, e)
                continue
            if not isinstance(entry, dict):
                log.warning("Skipping non-object manifest line %d in %s", line_number, url)
                continue

            commit_id = entry.get("id")
            properties = entry.get("properties")
            if commit_id is None or properties is None:
                continue
            if not isinstance(commit_id, str) or not isinstance(properties, dict):
                log.warning("Skipping malformed commit on manifest line %d in %s", line_number, url)
                continue
            yield CommitRecord(id=commit_id, properties=properties)

    def list_commits(
        self,
        remote: Mapping[str, Any],
        parameters: Mapping[str, Any],
        tags: Sequence[TagFilter],
    ) -> List[CommitRecord]:
        commits = self.get_all_commits(remote)
        matching = [c for c in commits if match_tags(c, tags)]
        return sort_descending(matching)

    def get_commit(
        self,
        remote: Mapping[str, Any],
        parameters: Mapping[str, Any],
        commit_id: str,
    ) -> Optional[Dict[str, Any]]:
        for commit in self.get_all_commits(remote):
            if commit.id == commit_id:
                return commit.properties
        return None

    def start_operation(self, operation: RemoteOperation) -> Any:
        self._require_pull(operation)
        return None

    def end_operation(self, operation: RemoteOperation, is_successful: bool) -> None:
        pass

    def pull_archive(self, operation: RemoteOperation, volume: str, archive: Path) -> None:
        self._require_pull(operation)

        archive_path = f"{operation.commit_id}/{volume}.tar.gz"
        url = self._resolve(operation.remote, archive_path)
        operation.update_progress(RemoteProgress.START, f"Downloading archive for {volume}", None)

        with self.get_file(operation.remote, archive_path) as response:
            if not response.is_success:
                raise RemoteIOError(url, response.status_code)
            with open(archive, "wb") as output:
                for chunk in response.iter_bytes(chunk_size=CHUNK_SIZE):
                    output.write(chunk)

        log.info("Downloaded %s to %s", url, archive)
        operation.update_progress(RemoteProgress.END, None, None)

    def push_archive(self, operation: RemoteOperation, volume: str, archive: Path) -> None:
        raise NotSupportedError(PUSH_NOT_SUPPORTED)

    def push_metadata(
        self,
        operation: RemoteOperation,
        commit: Mapping[str, Any],
        is_update: bool,
    ) -> None:
        raise NotSupportedError(PUSH_NOT_SUPPORTED)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "S3WebRemoteServer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def _require_pull(operation: RemoteOperation) -> None:
        if check_operation(operation.type) is not GateDecision.OK:
            raise NotSupportedError(PUSH_NOT_SUPPORTED)

    @staticmethod
    def _resolve(remote: Mapping[str, Any], path: str) -> str:
        return f"{remote['url']}/{path}"
