"""
Paths locating a sub-value inside the validated tree.

A path is a tuple of steps: strings for mapping keys, ints for sequence
indices. Rendering and parsing use the same notation:

- Identifier keys: "user.name"
- Indices: "tags[0]", "[1].x"
- Other keys: 'headers["content-type"]'
"""

from __future__ import annotations

import json
import re
from typing import Any

from .types import Path, PathStep

ROOT_LABEL = "value"


def extend_path(path: Path, step: PathStep) -> Path:
    """Return a new path with `step` appended; `path` is left untouched."""
    return (*path, step)


def _is_index(step: PathStep) -> bool:
    return isinstance(step, int) and not isinstance(step, bool)


def render_path(path: Path) -> str:
    """
    Render a path in dotted notation.

    Examples:
        ()                       -> "value"
        ("points", 0, "x")       -> "points[0].x"
        ("headers", "a-b")       -> 'headers["a-b"]'
    """
    if not path:
        return ROOT_LABEL

    parts: list[str] = []
    for step in path:
        if _is_index(step):
            parts.append(f"[{step}]")
        elif isinstance(step, str) and step.isidentifier():
            parts.append(f".{step}" if parts else step)
        else:
            parts.append(f"[{json.dumps(str(step))}]")
    return "".join(parts)


def render_json_path(path: Path) -> str:
    """Render a path with every step bracketed, e.g. '["points"][0]["x"]'."""
    if not path:
        return ROOT_LABEL
    return "".join(
        f"[{step}]" if _is_index(step) else f"[{json.dumps(str(step))}]"
        for step in path
    )


class PathParser:
    """Parser for the dotted notation produced by render_path()."""

    KEY_PATTERN = re.compile(r"^[^\W\d]\w*")
    INDEX_PATTERN = re.compile(r"^\[(\d+)\]")
    QUOTED_KEY_PATTERN = re.compile(r'^\[("(?:[^"\\]|\\.)*")\]')

    def parse(self, path_str: str) -> Path:
        """Parse a path string into a tuple of steps."""
        if not path_str:
            return ()

        steps: list[PathStep] = []
        remaining = path_str

        while remaining:
            step, rest = self._parse_step(remaining)
            if step is None:
                raise ValueError(f"Invalid path syntax at: {remaining}")
            steps.append(step)
            remaining = rest

            # Skip dot separator, which must be followed by a key
            if remaining.startswith("."):
                remaining = remaining[1:]
                if not self.KEY_PATTERN.match(remaining):
                    raise ValueError(f"Expected a key after '.' in: {path_str}")
            elif remaining and not remaining.startswith("["):
                raise ValueError(f"Invalid path syntax at: {remaining}")

        return tuple(steps)

    def _parse_step(self, s: str) -> tuple[PathStep | None, str]:
        """Parse a single step from the start of string s."""
        if match := self.INDEX_PATTERN.match(s):
            return int(match.group(1)), s[match.end() :]

        if match := self.QUOTED_KEY_PATTERN.match(s):
            return json.loads(match.group(1)), s[match.end() :]

        if match := self.KEY_PATTERN.match(s):
            return match.group(0), s[match.end() :]

        return None, s


def parse_path(path_str: str) -> Path:
    """Convenience function to parse a path string."""
    parser = PathParser()
    return parser.parse(path_str)


def is_path(value: Any) -> bool:
    """Check that `value` is a tuple or list of str/non-negative int steps."""
    if not isinstance(value, (tuple, list)):
        return False
    return all(
        isinstance(step, str) or (_is_index(step) and step >= 0) for step in value
    )


def to_path(value: Any) -> Path:
    """
    Normalize a starting path.

    Accepts None, a path string, or a tuple/list of steps.

    Raises:
        ValueError: If a path string cannot be parsed
        TypeError: If the value is not a path at all
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return parse_path(value)
    if is_path(value):
        return tuple(value)
    raise TypeError(f"Expected a path, got {value!r}")
