"""Helpers shared by remote providers: locator decomposition and commit filtering."""

from typing import Iterable, List, Optional, Sequence, Tuple
from urllib.parse import urlsplit

from .errors import InvalidArgumentError
from .types import CommitRecord, ConnectionInfo

TagFilter = Tuple[str, Optional[str]]


def get_connection_info(locator: str) -> ConnectionInfo:
    """
    Split a locator into its user, password, host, port and path components.

    Components that are absent come back as None. The host keeps its original
    case, the port keeps its original digits and the path is returned
    verbatim, without percent-decoding.

    Raises:
        InvalidArgumentError: If the locator cannot be split or the port is not a number.
    """
    try:
        parts = urlsplit(locator)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid locator '{locator}'") from e
    if not parts.netloc:
        return ConnectionInfo(None, None, None, None, parts.path or None)

    userinfo, has_userinfo, hostport = parts.netloc.rpartition("@")
    username: Optional[str] = None
    password: Optional[str] = None
    if has_userinfo:
        username, has_password, raw_password = userinfo.partition(":")
        password = raw_password if has_password else None

    host, port = _split_host_port(hostport)
    return ConnectionInfo(
        username=username,
        password=password,
        host=host or None,
        port=port,
        path=parts.path or None,
    )


def _split_host_port(hostport: str) -> Tuple[str, Optional[str]]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise InvalidArgumentError(f"Invalid host '{hostport}'")
        host, rest = hostport[: end + 1], hostport[end + 1 :]
        raw_port = rest[1:] if rest.startswith(":") else ""
    else:
        host, _, raw_port = hostport.partition(":")

    if not raw_port:
        return host, None
    if not raw_port.isdigit():
        raise InvalidArgumentError(f"Invalid port '{raw_port}'")
    return host, raw_port


def match_tags(record: CommitRecord, tags: Iterable[TagFilter]) -> bool:
    """
    Return True if *record* carries every tag in *tags*.

    A filter value of None matches any value as long as the key is present.
    """
    commit_tags = record.tags
    for key, value in tags:
        if key not in commit_tags:
            return False
        if value is not None and commit_tags[key] != value:
            return False
    return True


def sort_descending(records: Sequence[CommitRecord]) -> List[CommitRecord]:
    """
    Order records newest first by their ISO-8601 timestamp.

    The sort is stable: records with equal timestamps keep manifest order.
    Records without a timestamp go last.
    """
    with_timestamp = [r for r in records if r.timestamp is not None]
    without_timestamp = [r for r in records if r.timestamp is None]
    return sorted(with_timestamp, key=lambda r: r.timestamp, reverse=True) + without_timestamp
