"""Rendering of decoded secret entries.

Supported formats:

- text: a single requested entry is printed as its bare value, several
  entries (or every key of the secret) as ``key='value'`` lines
- json: ``{name, namespace, type, data: [{key, value}, ...]}`` indented by 2
- yaml: the same document as YAML
"""

import json
from collections.abc import Sequence
from typing import Any, TextIO

import yaml

from kubectl_view_secret.models import KeyValue, OutputFormat, Secret


class _BlockStyleDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    style = "|" if "\n" in value else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", value, style=style)


_BlockStyleDumper.add_representer(str, _represent_str)


def _document(key_values: Sequence[KeyValue], secret: Secret) -> dict[str, Any]:
    return {
        "name": secret.name,
        "namespace": secret.namespace,
        "type": secret.type,
        "data": [{"key": kv.key, "value": kv.value} for kv in key_values],
    }


def _format_text(key_values: Sequence[KeyValue], multi: bool) -> str:
    if not multi and len(key_values) == 1:
        return f"{key_values[0].value}\n"
    return "".join(f"{kv.key}='{kv.value}'\n" for kv in key_values)


def _format_json(key_values: Sequence[KeyValue], secret: Secret) -> str:
    return json.dumps(_document(key_values, secret), indent=2, ensure_ascii=False) + "\n"


def _format_yaml(key_values: Sequence[KeyValue], secret: Secret) -> str:
    return yaml.dump(
        _document(key_values, secret),
        Dumper=_BlockStyleDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def format_key_values(
    key_values: Sequence[KeyValue],
    secret: Secret,
    output_format: OutputFormat,
    *,
    multi: bool = False,
) -> str:
    """Render decoded entries as text.

    Entries are rendered in the order given; callers pass them sorted by key.

    Args:
        key_values: The decoded entries.
        secret: The secret the entries belong to (name, namespace and type).
        output_format: The format to render.
        multi: Entries come from a request for every key; text output then
            uses the key='value' form even for a single entry.

    Returns:
        The rendered output, newline terminated.

    """
    match output_format:
        case OutputFormat.JSON:
            return _format_json(key_values, secret)
        case OutputFormat.YAML:
            return _format_yaml(key_values, secret)
        case _:
            return _format_text(key_values, multi)


def render(
    key_values: Sequence[KeyValue],
    secret: Secret,
    output_format: OutputFormat,
    sink: TextIO,
    *,
    multi: bool = False,
) -> None:
    """Render decoded entries and write them to sink in a single write."""
    sink.write(format_key_values(key_values, secret, output_format, multi=multi))
    sink.flush()
