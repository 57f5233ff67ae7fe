"""SecretViewer facade class.

This module provides the SecretViewer class which serves as the main entry
point for viewing secrets, coordinating kubectl, selection and rendering.
"""

import sys
from typing import TextIO

from icecream import ic

from kubectl_view_secret import console
from kubectl_view_secret.kubectl import Kubectl
from kubectl_view_secret.models import OutputFormat, Secret
from kubectl_view_secret.secrets.prompts import Prompter
from kubectl_view_secret.secrets.rendering import render
from kubectl_view_secret.secrets.resolver import pick_secret, resolve


class SecretViewer:
    """Fetches, decodes and prints Kubernetes secrets.

    Attributes:
        kubectl: Kubectl instance used to read secrets.
        prompter: Prompter used when the operator has to choose.
        output: Sink for the rendered secret values.

    """

    def __init__(self, kubectl: Kubectl, prompter: Prompter, output: TextIO | None = None) -> None:
        self.kubectl: Kubectl = kubectl
        self.prompter: Prompter = prompter
        self.output: TextIO = output if output is not None else sys.stdout

    def fetch(self, secret_name: str | None) -> Secret:
        """Fetch the named secret, or let the operator pick one.

        Raises:
            KubectlError: If kubectl fails.
            SecretParsingError: If kubectl output cannot be parsed.
            NoSecretFoundError: If no name was given and no secrets exist.
            PromptError: If the operator cancels the selection.

        """
        if secret_name:
            with console.spinner(f"Reading secret {console.highlight(secret_name)}..."):
                return self.kubectl.get_secret(secret_name)

        with console.spinner("Listing secrets..."):
            secrets = self.kubectl.list_secrets()
        ic(len(secrets))

        qualified = self.kubectl.options.all_namespaces
        secret = pick_secret(secrets, self.prompter, scope=self.kubectl.describe_scope(), qualified=qualified)
        if len(secrets) == 1:
            label = secret.qualified_name if qualified else secret.name
            console.info(f"Only one secret found, viewing {console.highlight(label)}")
        return secret

    def view(
        self,
        secret_name: str | None,
        key: str | None = None,
        *,
        decode_all: bool = False,
        output_format: OutputFormat = OutputFormat.TEXT,
    ) -> None:
        """Decode a secret and write the requested entries to the output sink.

        Nothing is written to the output sink unless every selected entry
        decoded successfully.

        Args:
            secret_name: Secret to view; the operator picks one if empty.
            key: Key to decode; the operator picks one if empty and the
                secret has several keys.
            decode_all: Decode every key.
            output_format: Format of the output.

        Raises:
            ViewSecretError: On any failure (see the exceptions module).

        """
        secret = self.fetch(secret_name)
        ic(secret.name, secret.namespace, secret.type, secret.keys)

        selection = resolve(secret, self.prompter, key=key or "", decode_all_keys=decode_all)
        if selection.auto_selected is not None:
            console.info(f"Viewing only available key: {console.highlight(selection.auto_selected)}")

        render(selection.key_values, secret, output_format, self.output, multi=selection.multi)

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"SecretViewer(kubectl={self.kubectl!r})"
