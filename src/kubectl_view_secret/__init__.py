"""kubectl-view-secret: decode Kubernetes secrets from the command line.

This package fetches secrets through kubectl, decodes their values
according to the secret type and prints them as text, JSON or YAML.

Example usage:
    from kubectl_view_secret import Kubectl, ScriptedPrompter, SecretViewer

    # Decode a single key from the current namespace
    viewer = SecretViewer(Kubectl(), ScriptedPrompter([]))
    viewer.view("my-secret", "password")
"""

__version__ = "0.1.0"

from kubectl_view_secret.cli import cli
from kubectl_view_secret.core.viewer import SecretViewer
from kubectl_view_secret.exceptions import (
    DecodeError,
    KeyNotFoundError,
    KubectlError,
    NoSecretFoundError,
    PromptError,
    SecretEmptyError,
    SecretParsingError,
    ViewSecretError,
)
from kubectl_view_secret.kubectl import Kubectl
from kubectl_view_secret.secrets.prompts import ScriptedPrompter

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Classes
    "Kubectl",
    "ScriptedPrompter",
    "SecretViewer",
    # Exceptions
    "ViewSecretError",
    "DecodeError",
    "KeyNotFoundError",
    "KubectlError",
    "NoSecretFoundError",
    "PromptError",
    "SecretEmptyError",
    "SecretParsingError",
]
