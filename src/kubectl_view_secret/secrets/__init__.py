"""Secret decoding subpackage.

This package contains modules for type classification, value decoding,
kubectl output parsing, key selection, rendering and selection prompts.
"""

from kubectl_view_secret.secrets.classify import classify
from kubectl_view_secret.secrets.decoding import decode, decode_all, decode_key
from kubectl_view_secret.secrets.parsing import parse_secret, parse_secret_list
from kubectl_view_secret.secrets.prompts import Prompter, QuestionaryPrompter, ScriptedPrompter, StreamPrompter
from kubectl_view_secret.secrets.rendering import format_key_values, render
from kubectl_view_secret.secrets.resolver import pick_secret, resolve

__all__ = [
    # classify
    "classify",
    # decoding
    "decode",
    "decode_key",
    "decode_all",
    # parsing
    "parse_secret",
    "parse_secret_list",
    # prompts
    "Prompter",
    "QuestionaryPrompter",
    "ScriptedPrompter",
    "StreamPrompter",
    # rendering
    "format_key_values",
    "render",
    # resolver
    "resolve",
    "pick_secret",
]
