import json
from collections.abc import Mapping
from enum import StrEnum
from typing import Any
from urllib.parse import parse_qs

from pydantic import BaseModel


class DecodeStatus(StrEnum):
    decoded = "decoded"
    empty = "empty"
    malformed = "malformed"


class DecodedBody(BaseModel):
    status: DecodeStatus
    payload: dict[Any, Any] | None = None

    @property
    def is_benign_test(self) -> bool:
        """Empty and malformed bodies are both answered as connectivity tests."""
        return self.status != DecodeStatus.decoded


def _parse_json(text: str) -> DecodedBody | None:
    try:
        obj = json.loads(text)
    except (json.JSONDecodeError, ValueError, RecursionError):
        return None
    if isinstance(obj, dict):
        return DecodedBody(status=DecodeStatus.decoded, payload=obj)
    return DecodedBody(status=DecodeStatus.malformed)


def _parse_form(text: str) -> DecodedBody | None:
    if text[0] in "{[" or "=" not in text:
        return None
    parsed = parse_qs(text, keep_blank_values=True)
    if not parsed:
        return None
    # Repeated keys: the last value wins.
    return DecodedBody(
        status=DecodeStatus.decoded,
        payload={key: values[-1] for key, values in parsed.items()},
    )


def decode_body(raw: bytes | str | Mapping | None) -> DecodedBody:
    """Turn a raw webhook body into a mapping without ever raising.

    Text is read as JSON first and as an URL-encoded form second.
    """
    if raw is None:
        return DecodedBody(status=DecodeStatus.empty)

    if isinstance(raw, Mapping):
        return DecodedBody(status=DecodeStatus.decoded, payload=dict(raw))

    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            return DecodedBody(status=DecodeStatus.malformed)

    if not isinstance(raw, str):
        return DecodedBody(status=DecodeStatus.malformed)

    text = raw.strip()
    if not text:
        return DecodedBody(status=DecodeStatus.empty)

    for parse in (_parse_json, _parse_form):
        result = parse(text)
        if result is not None:
            return result

    return DecodedBody(status=DecodeStatus.malformed)
