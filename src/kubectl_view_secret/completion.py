"""Shell completion for namespaces, secret names and secret keys.

The callbacks are attached to click parameters via ``shell_complete``.
A failed kubectl lookup yields no completions rather than an error.
"""

import click
from click.shell_completion import CompletionItem

from kubectl_view_secret.exceptions import ViewSecretError
from kubectl_view_secret.kubectl import Kubectl
from kubectl_view_secret.models import KubectlOptions


def _kubectl_from_context(ctx: click.Context) -> Kubectl:
    params = ctx.params
    return Kubectl(
        KubectlOptions(
            namespace=params.get("namespace"),
            context=params.get("context"),
            kubeconfig=params.get("kubeconfig"),
            impersonate=params.get("impersonate"),
            impersonate_groups=tuple(params.get("impersonate_groups") or ()),
        )
    )


def _items(candidates: list[str], incomplete: str) -> list[CompletionItem]:
    return [CompletionItem(value) for value in candidates if value.startswith(incomplete)]


def complete_namespaces(ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]:
    try:
        return _items(_kubectl_from_context(ctx).namespaces(), incomplete)
    except (ViewSecretError, ValueError):
        return []


def complete_secret_names(ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]:
    try:
        return _items(_kubectl_from_context(ctx).secret_names(), incomplete)
    except (ViewSecretError, ValueError):
        return []


def complete_secret_keys(ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]:
    """Complete data keys of the secret named by the first argument."""
    secret_name = ctx.params.get("secret_name")
    if not secret_name:
        return []
    try:
        return _items(_kubectl_from_context(ctx).data_keys(secret_name), incomplete)
    except (ViewSecretError, ValueError):
        return []
