"""Custom exceptions for kubectl-view-secret.

This module defines the exception hierarchy used throughout the application
to provide meaningful error messages and proper error handling.
"""


class ViewSecretError(Exception):
    """Base exception for all kubectl-view-secret errors.

    All custom exceptions in this package inherit from this class,
    allowing the CLI to surface any of them as a single terminal message.
    """

    pass


class SecretEmptyError(ViewSecretError):
    """Raised when the secret has no data keys to decode."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Secret '{name}' is empty")


class KeyNotFoundError(ViewSecretError):
    """Raised when an explicitly requested key is absent from the secret."""

    def __init__(self, key: str, name: str) -> None:
        self.key = key
        self.name = name
        super().__init__(f"Provided key '{key}' not found in secret '{name}'")


class NoSecretFoundError(ViewSecretError):
    """Raised when listing secrets returned no items."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"No secrets found in {scope}")


class DecodeError(ViewSecretError):
    """Raised when a secret value cannot be decoded.

    Attributes:
        stage: The decoding stage that failed (e.g. outer base64 decode).
        detail: Description of the underlying failure.
        key: The secret key being decoded, when known.

    The underlying exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, stage: str, detail: str, key: str | None = None) -> None:
        self.stage = stage
        self.detail = detail
        self.key = key
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"{self.stage} failed: {self.detail}"
        if self.key is not None:
            return f"Failed to decode key '{self.key}': {message}"
        return message

    def for_key(self, key: str) -> "DecodeError":
        """Return a copy of this error attributed to a secret key."""
        return DecodeError(self.stage, self.detail, key=key)


class PromptError(ViewSecretError):
    """Raised when interactive selection is cancelled or its input is closed.

    This can occur when:
    - The operator presses Ctrl-C or Ctrl-D in the selection widget
    - The non-interactive input stream reaches end of file
    - The answer read from the input stream is not one of the options
    """

    pass


class SecretParsingError(ViewSecretError):
    """Raised when kubectl output cannot be parsed.

    Attributes:
        expected: The shape that was expected ("Secret" or "SecretList").

    """

    def __init__(self, expected: str, detail: str) -> None:
        self.expected = expected
        super().__init__(f"Failed to parse kubectl output as a {expected}: {detail}")


class KubectlError(ViewSecretError):
    """Raised when the kubectl invocation fails.

    This can occur when:
    - kubectl is not installed or not on PATH
    - The secret does not exist or the user lacks permission to read it
    - The cluster is unreachable
    """

    pass
