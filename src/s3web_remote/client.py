"""
Locator translation for s3web remotes.

The locator syntax is the HTTP address of a published repository with the
scheme swapped for "s3web":

    s3web://host[:port][/path]

Resources are always fetched over plain HTTP.
"""

import logging
from typing import Any, Dict, Mapping, Tuple

from .base import RemoteClient
from .errors import InvalidArgumentError
from .util import get_connection_info

log = logging.getLogger(__name__)

PROVIDER_NAME = "s3web"


class S3WebRemoteClient(RemoteClient):
    def get_provider(self) -> str:
        return PROVIDER_NAME

    def parse_uri(self, uri: str, additional_properties: Mapping[str, str]) -> Dict[str, Any]:
        username, password, host, port, path = get_connection_info(uri)

        if password is not None:
            raise InvalidArgumentError("Username and password cannot be specified for s3web remote")

        if username is not None:
            raise InvalidArgumentError("Username cannot be specified for s3web remote")

        if host is None:
            raise InvalidArgumentError("Missing host in s3web remote")

        for key in additional_properties:
            raise InvalidArgumentError(f"Invalid remote property '{key}'")

        url = f"http://{host}"
        if port is not None:
            url += f":{port}"
        if path is not None:
            url += path

        log.debug("Parsed s3web locator %s -> %s", uri, url)
        return {"url": url}

    def to_uri(self, properties: Mapping[str, Any]) -> Tuple[str, Dict[str, str]]:
        url: str = properties["url"]
        return url.replace("http", PROVIDER_NAME, 1), {}

    def get_parameters(self, remote_properties: Mapping[str, Any]) -> Dict[str, Any]:
        return {}
