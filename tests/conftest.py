"""Shared test fixtures for kubectl-view-secret tests."""

import base64
import gzip
import json
from unittest.mock import MagicMock, patch

import pytest

from kubectl_view_secret import console
from kubectl_view_secret.models import Secret


def b64(text: str | bytes) -> str:
    """Base64 encode text the way Kubernetes stores secret values."""
    if isinstance(text, str):
        text = text.encode()
    return base64.b64encode(text).decode()


def helm_encode(text: str) -> str:
    """Encode text the way a Helm release value is stored in a secret."""
    return b64(b64(gzip.compress(text.encode())))


@pytest.fixture(autouse=True)
def reset_console_quiet():
    """Ensure quiet mode does not leak between tests."""
    yield
    console.set_quiet(False)


@pytest.fixture
def secret_json():
    """kubectl JSON output for a two key Opaque secret."""
    return json.dumps(
        {
            "apiVersion": "v1",
            "data": {
                "key1": "dmFsdWUxCg==",
                "key2": "dmFsdWUyCg==",
            },
            "kind": "Secret",
            "metadata": {
                "creationTimestamp": "2024-08-02T21:25:40Z",
                "name": "test",
                "namespace": "default",
                "resourceVersion": "715",
                "uid": "0027fdc9-5371-4715-a0a8-61f3f78fdd36",
            },
            "type": "Opaque",
        }
    ).encode()


@pytest.fixture
def secret_list_json():
    """kubectl JSON output for a list of secrets in two namespaces."""
    return json.dumps(
        {
            "apiVersion": "v1",
            "kind": "List",
            "items": [
                {
                    "metadata": {"name": "db", "namespace": "default"},
                    "type": "Opaque",
                    "data": {"password": b64("hunter2")},
                },
                {
                    "metadata": {"name": "api", "namespace": "prod"},
                    "type": "Opaque",
                    "data": {"token": b64("abc"), "user": b64("svc")},
                },
            ],
        }
    ).encode()


@pytest.fixture
def multi_key_secret():
    """Opaque secret with two keys."""
    return Secret(
        name="test",
        namespace="default",
        type="Opaque",
        data={"TEST_PASSWORD_2": "dmVyeXNlY3JldAo=", "TEST_PASSWORD": "c2VjcmV0Cg=="},
    )


@pytest.fixture
def single_key_secret():
    """Opaque secret with a single key."""
    return Secret(
        name="single",
        namespace="default",
        type="Opaque",
        data={"SINGLE_PASSWORD": "c2VjcmV0Cg=="},
    )


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for kubectl execution."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(returncode=0, stdout=b"", stderr=b"")
        yield mock
