"""Selection of the secret entries to display.

Given a secret, the requested key and the ``--all`` flag, decide which
keys to decode. The rules are applied in order, first match wins:

1. the secret has no data: fail with SecretEmptyError
2. ``--all`` was given: decode every key
3. the secret has a single key: decode it, whatever was requested
4. a key was given: decode it, or fail with KeyNotFoundError
5. otherwise ask the operator to pick "all" or one key, and re-apply
   the rules with the answer
"""

from icecream import ic

from kubectl_view_secret.exceptions import KeyNotFoundError, NoSecretFoundError, SecretEmptyError
from kubectl_view_secret.models import Secret, SecretList, Selection
from kubectl_view_secret.secrets.decoding import decode_all, decode_key
from kubectl_view_secret.secrets.prompts import Prompter

ALL_KEYS = "all"

KEY_PROMPT_TITLE = "Select key to decode"
KEY_PROMPT_DESCRIPTION = "Multiple keys found in secret {name}, choose one or 'all'"
SECRET_PROMPT_TITLE = "Select secret to view"
SECRET_PROMPT_DESCRIPTION = "No secret name given, choose one of {count} secrets"


def resolve(
    secret: Secret,
    prompter: Prompter,
    *,
    key: str = "",
    decode_all_keys: bool = False,
) -> Selection:
    """Decide which entries of a secret to decode, and decode them.

    Args:
        secret: The secret to inspect.
        prompter: Asked to disambiguate when several keys exist and neither
            a key nor ``decode_all_keys`` was given.
        key: Explicitly requested key, empty if none.
        decode_all_keys: Decode every key.

    Returns:
        The decoded selection.

    Raises:
        SecretEmptyError: If the secret has no data.
        KeyNotFoundError: If the requested key does not exist.
        DecodeError: If a selected value cannot be decoded.
        PromptError: If the operator cancels the selection.

    """
    if not secret.data:
        raise SecretEmptyError(secret.name)

    while True:
        if decode_all_keys:
            return Selection(key_values=decode_all(secret), multi=True)

        if len(secret.data) == 1:
            (only_key,) = secret.data
            return Selection(
                key_values=(decode_key(secret, only_key),),
                multi=False,
                auto_selected=only_key,
            )

        if key:
            if key not in secret.data:
                raise KeyNotFoundError(key, secret.name)
            return Selection(key_values=(decode_key(secret, key),), multi=False)

        choice = prompter.select(
            KEY_PROMPT_TITLE,
            KEY_PROMPT_DESCRIPTION.format(name=secret.name),
            [ALL_KEYS, *secret.keys],
        )
        ic(choice)
        if choice == ALL_KEYS:
            decode_all_keys = True
        else:
            key = choice


def secret_label(secret: Secret, *, qualified: bool) -> str:
    """Label shown for a secret when picking from a list."""
    return secret.qualified_name if qualified else secret.name


def pick_secret(secrets: SecretList, prompter: Prompter, *, scope: str, qualified: bool = False) -> Secret:
    """Choose one secret from a listing.

    A listing with a single secret needs no prompt.

    Args:
        secrets: The listed secrets.
        prompter: Asked to pick when more than one secret exists.
        scope: Human readable description of where the listing came from.
        qualified: Label secrets as ``namespace/name`` (for cross-namespace listings).

    Returns:
        The chosen secret.

    Raises:
        NoSecretFoundError: If the listing is empty.
        PromptError: If the operator cancels the selection.

    """
    if not secrets:
        raise NoSecretFoundError(scope)

    by_label = {secret_label(secret, qualified=qualified): secret for secret in secrets.items}
    if len(by_label) == 1:
        return next(iter(by_label.values()))

    choice = prompter.select(
        SECRET_PROMPT_TITLE,
        SECRET_PROMPT_DESCRIPTION.format(count=len(by_label)),
        sorted(by_label),
    )
    ic(choice)
    return by_label[choice]
