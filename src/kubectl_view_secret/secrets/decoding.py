"""Secret value decoding.

This module reverses the encodings Kubernetes and Helm apply to secret
values: plain base64, double base64 wrapped gzip archives (Helm releases)
and base64 encoded JSON documents (docker config).
"""

import base64
import gzip
import json
import string
import zlib

from icecream import ic

from kubectl_view_secret.exceptions import DecodeError
from kubectl_view_secret.models import DecodeStrategy, KeyValue, Secret
from kubectl_view_secret.secrets.classify import classify

# Decoding stages reported in DecodeError
STAGE_BASE64 = "base64 decode"
STAGE_OUTER_BASE64 = "outer base64 decode"
STAGE_INNER_BASE64 = "inner base64 decode"
STAGE_GZIP_OPEN = "gzip stream open"
STAGE_GZIP_READ = "gzip stream read"

_BASE64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/=")
_GZIP_MAGIC = b"\x1f\x8b"


def _describe_base64_error(value: str | bytes, err: ValueError) -> str:
    """Describe a base64 failure, including the first illegal byte offset."""
    if isinstance(value, bytes):
        value = value.decode("latin-1")
    for offset, char in enumerate(value):
        if char not in _BASE64_ALPHABET:
            return f"illegal base64 data at input byte {offset}"
    return str(err)


def _b64decode(value: str | bytes, stage: str) -> bytes:
    """Decode standard (not URL-safe) base64, rejecting foreign characters.

    Raises:
        DecodeError: If the input has invalid characters or padding.

    """
    try:
        return base64.b64decode(value, validate=True)
    except ValueError as err:
        raise DecodeError(stage, _describe_base64_error(value, err)) from err


def _to_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def decode_base64(value: str) -> str:
    """Decode a plain base64 value.

    Args:
        value: The base64 text.

    Returns:
        The decoded plaintext.

    Raises:
        DecodeError: If the value is not valid base64.

    """
    return _to_text(_b64decode(value, STAGE_BASE64))


def decode_helm_release(value: str) -> str:
    """Decode a Helm release value.

    Kubernetes base64 encodes the value Helm stores, which is itself the
    base64 encoding of a gzip compressed release document.

    Raises:
        DecodeError: If any stage fails; ``stage`` names which one.

    """
    outer = _b64decode(value, STAGE_OUTER_BASE64)
    archive = _b64decode(outer, STAGE_INNER_BASE64)

    if archive[:2] != _GZIP_MAGIC:
        raise DecodeError(STAGE_GZIP_OPEN, f"not a gzipped file (header {archive[:2]!r})")

    try:
        return _to_text(gzip.decompress(archive))
    except (OSError, EOFError, zlib.error) as err:
        raise DecodeError(STAGE_GZIP_READ, str(err) or type(err).__name__) from err


def decode_docker_config(value: str) -> str:
    """Decode a docker config value, pretty-printing it when it is valid JSON.

    Legacy docker config blobs are not always strict JSON, so a document
    that fails to parse (or nests too deeply) is returned as decoded.

    Raises:
        DecodeError: If the value is not valid base64.

    """
    raw = _b64decode(value, STAGE_BASE64)
    try:
        return json.dumps(json.loads(raw), indent=2, sort_keys=True, ensure_ascii=False)
    except (ValueError, RecursionError):
        return _to_text(raw)


_DECODERS = {
    DecodeStrategy.PLAIN_BASE64: decode_base64,
    DecodeStrategy.DOUBLE_BASE64_GZIP: decode_helm_release,
    DecodeStrategy.JSON_PRETTY_PRINT: decode_docker_config,
}


def decode(strategy: DecodeStrategy, value: str) -> str:
    """Decode a raw secret value with the given strategy.

    Args:
        strategy: The strategy returned by classify().
        value: The raw encoded value from the secret's data.

    Returns:
        The decoded plaintext.

    Raises:
        DecodeError: If the value cannot be decoded.

    """
    return _DECODERS[strategy](value)


def decode_key(secret: Secret, key: str) -> KeyValue:
    """Decode a single key of a secret.

    Args:
        secret: The secret holding the key.
        key: A key present in ``secret.data``.

    Returns:
        The decoded entry.

    Raises:
        DecodeError: Attributed to ``key`` if the value cannot be decoded.

    """
    strategy = classify(secret.type)
    ic(secret.type, strategy, key)
    try:
        return KeyValue(key, decode(strategy, secret.data[key]))
    except DecodeError as err:
        raise err.for_key(key) from err.__cause__


def decode_all(secret: Secret) -> tuple[KeyValue, ...]:
    """Decode every key of a secret, sorted ascending by key.

    Decoding stops at the first failure.

    Raises:
        DecodeError: Attributed to the first key that failed to decode.

    """
    return tuple(decode_key(secret, key) for key in secret.keys)
