"""kubectl invocation.

This module provides the Kubectl class, which builds kubectl command lines
from the targeting options and returns their fully buffered output.
"""

import json
import subprocess

from icecream import ic

from kubectl_view_secret.exceptions import KubectlError
from kubectl_view_secret.models import KubectlOptions, Secret, SecretList
from kubectl_view_secret.secrets.parsing import parse_secret, parse_secret_list

_ERR_KUBECTL_NOT_FOUND = "kubectl not found; please install kubectl and ensure it's on PATH"
_ERR_KUBECTL_FAILED = "kubectl {verb} failed (exit code {code}){details}"


class Kubectl:
    """Runs kubectl against the cluster selected by KubectlOptions.

    Attributes:
        options: Targeting options added to every command.
        binary: The kubectl executable to run.

    """

    def __init__(self, options: KubectlOptions | None = None, *, binary: str = "kubectl") -> None:
        self.options: KubectlOptions = options or KubectlOptions()
        self.binary: str = binary

    def _global_args(self) -> list[str]:
        args: list[str] = []
        if self.options.kubeconfig:
            args += ["--kubeconfig", self.options.kubeconfig]
        if self.options.context:
            args += ["--context", self.options.context]
        if self.options.impersonate:
            args += ["--as", self.options.impersonate]
        for group in self.options.impersonate_groups:
            args += ["--as-group", group]
        return args

    def _namespace_args(self, *, allow_all: bool = False) -> list[str]:
        if allow_all and self.options.all_namespaces:
            return ["--all-namespaces"]
        if self.options.namespace:
            return ["--namespace", self.options.namespace]
        return []

    def run(self, *args: str) -> bytes:
        """Run kubectl and return its standard output.

        Args:
            args: kubectl arguments, e.g. ``"get", "secret", "name"``.

        Returns:
            The complete standard output.

        Raises:
            KubectlError: If kubectl is missing or exits with a non-zero code.

        """
        cmd = [self.binary, *self._global_args(), *args]
        ic(cmd)

        try:
            result = subprocess.run(cmd, capture_output=True, check=True)
        except FileNotFoundError as err:
            raise KubectlError(_ERR_KUBECTL_NOT_FOUND) from err
        except subprocess.CalledProcessError as err:
            stderr_msg = err.stderr.decode(errors="replace").strip() if err.stderr else ""
            error_details = f": {stderr_msg}" if stderr_msg else ""
            raise KubectlError(
                _ERR_KUBECTL_FAILED.format(verb=args[0] if args else "", code=err.returncode, details=error_details)
            ) from err

        return result.stdout

    def get_secret(self, name: str) -> Secret:
        """Fetch a single secret.

        Raises:
            KubectlError: If kubectl fails.
            SecretParsingError: If the output is not a secret object.

        """
        return parse_secret(self.run("get", "secret", name, *self._namespace_args(), "-o", "json"))

    def list_secrets(self) -> SecretList:
        """List secrets in the target namespace, or in all namespaces.

        Raises:
            KubectlError: If kubectl fails.
            SecretParsingError: If the output is not a list of secrets.

        """
        return parse_secret_list(
            self.run("get", "secrets", *self._namespace_args(allow_all=True), "-o", "json")
        )

    def namespaces(self) -> list[str]:
        """Names of all namespaces."""
        out = self.run("get", "namespaces", "-o", "jsonpath={.items[*].metadata.name}")
        return out.decode().split()

    def secret_names(self) -> list[str]:
        """Names of the secrets in the target namespace."""
        out = self.run("get", "secrets", *self._namespace_args(), "-o", "jsonpath={.items[*].metadata.name}")
        return out.decode().split()

    def data_keys(self, name: str) -> list[str]:
        """Sorted data keys of a secret, without fetching its parsed form."""
        out = self.run("get", "secret", name, *self._namespace_args(), "-o", "jsonpath={.data}")
        if not out.strip():
            return []
        data = json.loads(out)
        if not isinstance(data, dict):
            return []
        return sorted(data)

    def describe_scope(self) -> str:
        """Human readable description of where secrets are looked up."""
        if self.options.all_namespaces:
            return "all namespaces"
        if self.options.namespace:
            return f"namespace '{self.options.namespace}'"
        return "the current namespace"

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"Kubectl(binary={self.binary!r}, options={self.options!r})"
