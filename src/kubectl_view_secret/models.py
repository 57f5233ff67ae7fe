"""Data models for kubectl-view-secret.

This module provides type-safe data structures for the application,
replacing the raw kubectl JSON dictionaries with proper Python data classes.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class SecretType(str, Enum):
    """Known Kubernetes secret types.

    Inherits from str so that members compare and hash equal to the raw
    ``type`` field of a secret. Secrets may carry any other type string.

    refs:
    - https://kubernetes.io/docs/concepts/configuration/secret/#secret-types
    """

    OPAQUE = "Opaque"
    TLS = "kubernetes.io/tls"
    SSH_AUTH = "kubernetes.io/ssh-auth"
    BASIC_AUTH = "kubernetes.io/basic-auth"
    SERVICE_ACCOUNT_TOKEN = "kubernetes.io/service-account-token"
    BOOTSTRAP_TOKEN = "bootstrap.kubernetes.io/token"
    HELM = "helm.sh/release.v1"
    DOCKER_CFG = "kubernetes.io/dockercfg"
    DOCKER_CONFIG_JSON = "kubernetes.io/dockerconfigjson"


class DecodeStrategy(str, Enum):
    """Decoding algorithms applied to secret values."""

    PLAIN_BASE64 = "plain-base64"
    DOUBLE_BASE64_GZIP = "double-base64-gzip"
    JSON_PRETTY_PRINT = "json-pretty-print"


class OutputFormat(str, Enum):
    """Supported output formats for decoded secrets."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def parse(cls, value: str | None) -> "OutputFormat":
        """Return the format named by value, falling back to text.

        Args:
            value: Format name as given on the command line (case-insensitive).

        Returns:
            The matching OutputFormat, or OutputFormat.TEXT if unrecognized.

        """
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.TEXT


class KeyValue(NamedTuple):
    """A decoded secret entry."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Secret:
    """A Kubernetes secret as returned by kubectl.

    Attributes:
        name: The secret name.
        namespace: The namespace the secret lives in.
        type: The declared secret type (any string, see SecretType).
        data: Read-only mapping of key to base64 encoded value.

    """

    name: str
    namespace: str
    type: str = ""
    data: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @property
    def keys(self) -> list[str]:
        """Data keys sorted ascending."""
        return sorted(self.data)

    @property
    def qualified_name(self) -> str:
        """The secret name prefixed with its namespace."""
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True, slots=True)
class SecretList:
    """An ordered list of secrets as returned by ``kubectl get secrets``."""

    items: tuple[Secret, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class Selection:
    """Outcome of resolving which secret entries to display.

    Attributes:
        key_values: Decoded entries, sorted ascending by key.
        multi: True when every key was requested, False for a single value.
        auto_selected: The key chosen without operator input, if any.

    """

    key_values: tuple[KeyValue, ...]
    multi: bool
    auto_selected: str | None = None


@dataclass(frozen=True, slots=True)
class KubectlOptions:
    """Targeting options forwarded to every kubectl invocation.

    Attributes:
        namespace: Namespace override; kubectl uses the context default if None.
        all_namespaces: List secrets across all namespaces.
        context: kubeconfig context to use.
        kubeconfig: Path to an alternative kubeconfig file.
        impersonate: User to impersonate.
        impersonate_groups: Groups to impersonate.

    """

    namespace: str | None = None
    all_namespaces: bool = False
    context: str | None = None
    kubeconfig: str | None = None
    impersonate: str | None = None
    impersonate_groups: tuple[str, ...] = ()
