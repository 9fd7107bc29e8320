"""Configuration models for the s3web provider.

Remote properties and operation parameters are modeled as pydantic models that
forbid extra keys, so unknown properties are rejected structurally. HTTP
settings follow the same env-driven pattern as the storage client factories.
"""

import logging
import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidArgumentError

log = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "s3web-remote"


class S3WebRemoteProperties(BaseModel):
    """Connection properties persisted by the host for an s3web remote."""

    model_config = ConfigDict(extra="forbid", strict=True)

    url: str = Field(..., description="HTTP base address of the published repository")


class S3WebParameters(BaseModel):
    """Per-operation parameters. s3web remotes take none."""

    model_config = ConfigDict(extra="forbid")


class HttpSettings(BaseModel):
    """Settings for the HTTP transport."""

    timeout_seconds: Optional[float] = Field(
        default=None, description="Request timeout, or None to block until the server answers"
    )
    follow_redirects: bool = Field(
        default=True, description="Follow redirects issued by CDNs in front of the bucket"
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value")


def load_http_settings(
    timeout_seconds: Optional[float] = None,
    follow_redirects: Optional[bool] = None,
) -> HttpSettings:
    """Build HttpSettings from explicit arguments, falling back to the environment.

    Reads S3WEB_HTTP_TIMEOUT (seconds) and S3WEB_FOLLOW_REDIRECTS ("true"/"false").

    Raises:
        InvalidArgumentError: If an environment value cannot be parsed.
    """
    if timeout_seconds is None:
        raw_timeout = os.getenv("S3WEB_HTTP_TIMEOUT")
        if raw_timeout:
            try:
                timeout_seconds = float(raw_timeout)
            except ValueError as e:
                raise InvalidArgumentError(
                    f"Invalid S3WEB_HTTP_TIMEOUT value {raw_timeout!r}"
                ) from e

    if follow_redirects is None:
        raw_redirects = os.getenv("S3WEB_FOLLOW_REDIRECTS")
        if raw_redirects is not None:
            follow_redirects = raw_redirects.strip().lower() in ("1", "true", "yes")
        else:
            follow_redirects = True

    settings = HttpSettings(timeout_seconds=timeout_seconds, follow_redirects=follow_redirects)
    log.debug("Loaded HTTP settings: %s", settings)
    return settings


def validate_model(model: type[BaseModel], values: Mapping[str, Any], kind: str) -> BaseModel:
    """Validate *values* against *model*, translating failures to InvalidArgumentError."""
    try:
        return model.model_validate(dict(values))
    except ValidationError as e:
        raise InvalidArgumentError(_describe_errors(e, kind)) from e


def _describe_errors(exc: ValidationError, kind: str) -> str:
    messages = []
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"]) or "<root>"
        if error["type"] == "extra_forbidden":
            messages.append(f"Invalid {kind} property '{name}'")
        elif error["type"] == "missing":
            messages.append(f"Missing required {kind} property '{name}'")
        else:
            messages.append(f"Invalid value for {kind} property '{name}': {error['msg']}")
    return "; ".join(messages)
