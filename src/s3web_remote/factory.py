"""Provider lookup by name."""

import logging
from typing import Dict, Optional, Type

from .base import RemoteClient, RemoteServer
from .client import PROVIDER_NAME, S3WebRemoteClient
from .config import HttpSettings
from .errors import InvalidArgumentError
from .server import S3WebRemoteServer

log = logging.getLogger(__name__)

_CLIENTS: Dict[str, Type[RemoteClient]] = {PROVIDER_NAME: S3WebRemoteClient}
_SERVERS: Dict[str, Type[S3WebRemoteServer]] = {PROVIDER_NAME: S3WebRemoteServer}


def create_remote_client(provider: str) -> RemoteClient:
    """Create the locator translator for *provider*.

    Raises:
        InvalidArgumentError: If no provider is registered under that name.
    """
    try:
        client_class = _CLIENTS[provider]
    except KeyError:
        raise InvalidArgumentError(
            f"Unsupported remote provider: {provider!r}. Supported: {', '.join(sorted(_CLIENTS))}"
        ) from None
    return client_class()


def create_remote_server(provider: str, settings: Optional[HttpSettings] = None) -> RemoteServer:
    """Create the catalog and archive fetcher for *provider*.

    Args:
        provider: Registered provider name, e.g. "s3web".
        settings: HTTP settings. Read from the environment if None.

    Raises:
        InvalidArgumentError: If no provider is registered under that name.
    """
    try:
        server_class = _SERVERS[provider]
    except KeyError:
        raise InvalidArgumentError(
            f"Unsupported remote provider: {provider!r}. Supported: {', '.join(sorted(_SERVERS))}"
        ) from None
    log.debug("Creating %s remote server", provider)
    return server_class(settings=settings)
