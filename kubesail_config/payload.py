"""Parsing and validation of the credential payload delivered to the callback."""
import json
import logging
from typing import Any, Dict
from urllib.parse import unquote

from pydantic import BaseModel, Field

from .errors import PayloadIncomplete, PayloadMalformed
from .utils import redact_sensitive_data

logger = logging.getLogger(__name__)

DATA_PARAM = "data"

# Wire names of the required fields, in the order they are reported
REQUIRED_FIELDS = ("username", "token", "cert", "clusterAddress", "namespace")


class CredentialPayload(BaseModel):
    """Cluster credentials sent back by the KubeSail registration page."""
    username: str
    token: str
    cert: str
    cluster_address: str = Field(alias="clusterAddress")
    namespace: str


def parse(raw_query: str) -> Dict[str, Any]:
    """Extract and decode the ``data`` parameter of a callback query string.

    Values are percent-decoded without turning ``+`` into a space, since the
    certificate travels as base64. When ``data`` is repeated the last value
    is used.

    Args:
        raw_query: The query string, with or without a leading ``?``

    Returns:
        The decoded JSON object

    Raises:
        PayloadMalformed: If ``data`` is absent, not valid UTF-8 or not a JSON object
    """
    raw = None
    for part in (raw_query or "").lstrip("?").split("&"):
        key, _, value = part.partition("=")
        if unquote(key) == DATA_PARAM:
            raw = value

    if raw is None:
        raise PayloadMalformed("error parsing data: missing 'data' parameter")

    try:
        data = json.loads(unquote(raw, errors="strict"))
    except ValueError as e:
        raise PayloadMalformed("error parsing data") from e

    if not isinstance(data, dict):
        raise PayloadMalformed("error parsing data: 'data' is not an object")

    logger.debug(f"Decoded callback data: {redact_sensitive_data(data)}")
    return data


def validate(data: Dict[str, Any]) -> CredentialPayload:
    """Check that every required field is a non-empty string.

    Raises:
        PayloadIncomplete: Naming each missing or empty field
    """
    missing = [
        name for name in REQUIRED_FIELDS
        if not isinstance(data.get(name), str) or not data[name].strip()
    ]
    if missing:
        raise PayloadIncomplete(missing)
    return CredentialPayload(**{name: data[name] for name in REQUIRED_FIELDS})


def parse_callback(raw_query: str) -> CredentialPayload:
    """``parse`` followed by ``validate``."""
    return validate(parse(raw_query))
