"""Core classes for kubectl-view-secret.

This package contains the SecretViewer facade.
"""

from kubectl_view_secret.core.viewer import SecretViewer

__all__ = ["SecretViewer"]
