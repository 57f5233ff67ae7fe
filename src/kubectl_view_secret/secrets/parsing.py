"""Parsing of kubectl JSON output.

This module turns the buffered output of ``kubectl get secret -o json``
and ``kubectl get secrets -o json`` into Secret and SecretList models.
"""

import json
from typing import Any

from kubectl_view_secret.exceptions import SecretParsingError
from kubectl_view_secret.models import Secret, SecretList

_SHAPE_SECRET = "Secret"
_SHAPE_SECRET_LIST = "SecretList"


def _load(raw: bytes | str, expected: str) -> dict[str, Any]:
    try:
        document = json.loads(raw)
    except ValueError as err:
        raise SecretParsingError(expected, f"malformed JSON: {err}") from err
    if not isinstance(document, dict):
        raise SecretParsingError(expected, f"expected a JSON object, got {type(document).__name__}")
    return document


def secret_from_dict(document: dict[str, Any], expected: str = _SHAPE_SECRET) -> Secret:
    """Build a Secret from a decoded Kubernetes secret object.

    A missing or null ``data`` field is treated as an empty secret.

    Raises:
        SecretParsingError: If the object does not have the shape of a secret.

    """
    metadata = document.get("metadata") or {}
    if not isinstance(metadata, dict):
        raise SecretParsingError(expected, "'metadata' is not an object")

    data = document.get("data") or {}
    if not isinstance(data, dict):
        raise SecretParsingError(expected, "'data' is not an object")
    for key, value in data.items():
        if not isinstance(value, str):
            raise SecretParsingError(expected, f"value of key '{key}' is not a string")

    return Secret(
        name=str(metadata.get("name") or ""),
        namespace=str(metadata.get("namespace") or ""),
        type=str(document.get("type") or ""),
        data=data,
    )


def parse_secret(raw: bytes | str) -> Secret:
    """Parse a single secret object.

    Args:
        raw: Output of ``kubectl get secret <name> -o json``.

    Returns:
        The parsed Secret.

    Raises:
        SecretParsingError: If the output is not a secret object.

    """
    return secret_from_dict(_load(raw, _SHAPE_SECRET))


def parse_secret_list(raw: bytes | str) -> SecretList:
    """Parse a list of secrets.

    Args:
        raw: Output of ``kubectl get secrets -o json``.

    Returns:
        The parsed SecretList, preserving item order.

    Raises:
        SecretParsingError: If the output is not a list of secret objects.

    """
    document = _load(raw, _SHAPE_SECRET_LIST)
    items = document.get("items") or []
    if not isinstance(items, list):
        raise SecretParsingError(_SHAPE_SECRET_LIST, "'items' is not an array")
    for item in items:
        if not isinstance(item, dict):
            raise SecretParsingError(_SHAPE_SECRET_LIST, "list item is not an object")
    return SecretList(items=tuple(secret_from_dict(item, _SHAPE_SECRET_LIST) for item in items))
