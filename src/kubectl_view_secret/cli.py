#!/usr/bin/env python
"""Command-line interface for kubectl-view-secret.

This module provides the main CLI entry point, handling command-line
argument parsing and wiring the options into a SecretViewer.
"""

import sys

import click
from icecream import ic

from kubectl_view_secret import __version__, console
from kubectl_view_secret.completion import complete_namespaces, complete_secret_keys, complete_secret_names
from kubectl_view_secret.core.viewer import SecretViewer
from kubectl_view_secret.exceptions import ViewSecretError
from kubectl_view_secret.kubectl import Kubectl
from kubectl_view_secret.models import KubectlOptions, OutputFormat
from kubectl_view_secret.secrets.prompts import Prompter, QuestionaryPrompter, StreamPrompter

EXAMPLES = """
\b
Examples:
  # pick a key of a secret interactively
  kubectl view-secret <secret>

\b
  # decode a specific key
  kubectl view-secret <secret> <key>

\b
  # decode all contents of a secret
  kubectl view-secret <secret> -a/--all

\b
  # pick a secret from another namespace
  kubectl view-secret -n/--namespace <ns>

\b
  # print all keys as yaml
  kubectl view-secret <secret> -a -o yaml
"""


def build_prompter() -> Prompter:
    """Select the prompter matching the attached stdin.

    Returns:
        A terminal prompter when stdin is a TTY, otherwise a prompter
        reading answers line by line from stdin.

    """
    if sys.stdin.isatty():
        return QuestionaryPrompter()
    return StreamPrompter(sys.stdin)


@click.command(
    help="Decode a kubernetes secret by name & key in the current context/cluster/namespace",
    epilog=EXAMPLES,
)
@click.argument("secret_name", required=False, shell_complete=complete_secret_names)
@click.argument("key", required=False, shell_complete=complete_secret_keys)
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
@click.option("--all", "-a", "decode_all", is_flag=True, default=False, help="decode all keys of the secret")
@click.option("--all-namespaces", "-A", is_flag=True, default=False, help="list secrets across all namespaces")
@click.option(
    "--namespace",
    "-n",
    required=False,
    shell_complete=complete_namespaces,
    help="override the namespace defined in the current context",
)
@click.option("--context", required=False, help="the name of the kubeconfig context to use")
@click.option("--kubeconfig", required=False, help="path to the kubeconfig file to use")
@click.option("--as", "impersonate", required=False, help="username to impersonate for the operation")
@click.option("--as-group", "impersonate_groups", multiple=True, help="group to impersonate, can be repeated")
@click.option("--output", "-o", default="text", show_default=True, help="output format: text, json or yaml")
@click.option("--quiet", "-q", is_flag=True, default=False, help="suppress info output")
def cli(
    secret_name: str | None,
    key: str | None,
    version: bool,
    debug: bool,
    decode_all: bool,
    all_namespaces: bool,
    namespace: str | None,
    context: str | None,
    kubeconfig: str | None,
    impersonate: str | None,
    impersonate_groups: tuple[str, ...],
    output: str,
    quiet: bool,
) -> None:
    """Process CLI arguments and view the requested secret.

    Args:
        secret_name: Secret to view; prompts for one if omitted.
        key: Key to decode; prompts for one if omitted.
        version: Print version and exit.
        debug: Enable debug output.
        decode_all: Decode all keys.
        all_namespaces: List secrets across all namespaces.
        namespace: Namespace override.
        context: kubeconfig context.
        kubeconfig: Path to kubeconfig.
        impersonate: User to impersonate.
        impersonate_groups: Groups to impersonate.
        output: Output format name.
        quiet: Suppress the info stream.

    """
    if not debug:
        ic.disable()
    else:
        ic.enable()

    console.set_quiet(quiet)

    if version:
        click.echo(__version__)
        return

    output_format = OutputFormat.parse(output)
    if output_format.value != output.strip().lower():
        console.warning(f"Unknown output format {console.highlight(output)}, using {output_format.value}")

    options = KubectlOptions(
        namespace=namespace,
        all_namespaces=all_namespaces,
        context=context,
        kubeconfig=kubeconfig,
        impersonate=impersonate,
        impersonate_groups=impersonate_groups,
    )
    ic(options)

    viewer = SecretViewer(Kubectl(options), build_prompter(), output=sys.stdout)
    try:
        viewer.view(secret_name, key, decode_all=decode_all, output_format=output_format)
    except ViewSecretError as e:
        raise click.ClickException(str(e)) from None


if __name__ == "__main__":
    cli()
