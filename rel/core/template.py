"""``${name}`` placeholder rendering for tag templates and changelog commands.

Only the braced ``${name}`` form is a placeholder. A bare ``$name`` or ``$$``
is literal text.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

__all__ = ["VERSION_PLACEHOLDER", "format_template", "has_placeholder", "render_command"]

VERSION_PLACEHOLDER = "${version}"

_PLACEHOLDER_RE = re.compile(r"\$\{(\w+)\}")


def _as_text(values: Mapping[str, object]) -> dict[str, str]:
    return {key: "" if value is None else str(value) for key, value in values.items()}


def format_template(template: str, values: Mapping[str, object]) -> str:
    """Substitute ``${name}`` placeholders in ``template``.

    ``None`` values render as an empty string. An unterminated ``${`` or a
    placeholder without a value renders as ``""`` so callers can fall back
    with ``or``.

    Example:
        format_template("v${version}", {"version": "1.0.0"})  # "v1.0.0"
    """
    rendered = _as_text(values)
    names = _PLACEHOLDER_RE.findall(template)
    if template.count("${") != len(names):
        return ""
    if any(name not in rendered for name in names):
        return ""
    return _PLACEHOLDER_RE.sub(lambda m: rendered[m.group(1)], template)


def has_placeholder(template: str, name: str) -> bool:
    """True if ``template`` references ``${name}``."""
    return f"${{{name}}}" in template


def render_command(command: str, values: Mapping[str, object]) -> str:
    """Substitute known ``${name}`` placeholders in a shell command line.

    Unknown placeholders and other ``$`` uses (``$1``, ``$HOME``, ``$$``) are
    left for the shell.
    """
    rendered = _as_text(values)
    return _PLACEHOLDER_RE.sub(lambda m: rendered.get(m.group(1), m.group(0)), command)
