"""
Message resolution and interpolation.

A messages configuration is either None, a string used verbatim for every
failure at that position (and below it), or a mapping. Mapping keys are
property names or indices, which drill into a child's configuration, or
control tokens naming a failure mode of the current kind.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .types import Messages

# Control tokens
INPUT = ":input"
VALUE = ":value"
PREDICATE = ":predicate"
DISPATCH = ":dispatch"
STRICT = ":strict"
TYPE = ":type"
DOMAIN = ":domain"
CODOMAIN = ":codomain"

DEFAULT_TEMPLATES: dict[str, str] = {
    VALUE: "Invalid value :actual supplied to :path (expected :expected)",
    INPUT: "Invalid value :actual supplied to :path (expected :shape for :expected)",
    PREDICATE: "Invalid value :actual supplied to :path (refinement :expected failed)",
    DISPATCH: "Invalid value :actual supplied to :path (no member of :expected matches)",
    STRICT: "Invalid value :actual supplied to :path (unexpected key, expected :expected)",
}


def is_messages(messages: Any) -> bool:
    return messages is None or isinstance(messages, (str, Mapping))


def get_message(messages: Messages, key: Any) -> Messages:
    """
    Resolve the configuration that applies to `key`.

    Returns:
        messages[key] if messages is a mapping holding key
        messages itself if it is a plain string
        None otherwise
    """
    if isinstance(messages, Mapping):
        if key in messages:
            return messages[key]
        return None
    if isinstance(messages, str):
        return messages
    return None


def format_message(template: str, params: Mapping[str, Any]) -> str:
    """
    Replace every ':name' placeholder whose name is in `params`.

    Placeholder names run over identifier characters, so ':paths' is never
    read as ':path'. Unknown placeholders are kept verbatim.

    Usage:
        format_message("bad :actual at :path", {"actual": "1", "path": "x"})
        # 'bad 1 at x'
    """
    out: list[str] = []
    i = 0
    n = len(template)
    while i < n:
        ch = template[i]
        if ch != ":":
            out.append(ch)
            i += 1
            continue

        j = i + 1
        while j < n and (template[j].isalnum() or template[j] == "_"):
            j += 1
        name = template[i + 1 : j]
        if name and name in params:
            out.append(str(params[name]))
        else:
            out.append(template[i:j])
        i = j
    return "".join(out)
