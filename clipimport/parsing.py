"""Typed readers for import settings coming from YAML files or the environment.

Settings arrive either as native YAML scalars or as environment strings, so
every reader accepts both and reports failures against the setting label the
user actually wrote (`min_import_chars` in YAML, `CLIPIMPORT_MIN_IMPORT_CHARS`
in the environment).
"""

from __future__ import annotations

import re


_ENABLED_TOKENS = frozenset({"1", "true", "yes", "on", "enabled"})
_DISABLED_TOKENS = frozenset({"0", "false", "no", "off", "disabled"})
_INTEGER_RE = re.compile(r"[+-]?\d+")


def setting_text(value: object) -> str | None:
    """Return a setting as stripped text, or `None` when it is unset or blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_toggle(value: object, setting: str) -> bool:
    """Read an on/off setting such as `use_sample_content`.

    Raises:
        ValueError: If the value is not a recognized on/off token.
    """

    if isinstance(value, bool):
        return value
    token = (setting_text(value) or "").lower()
    if token in _ENABLED_TOKENS:
        return True
    if token in _DISABLED_TOKENS:
        return False
    raise ValueError(
        f"`{setting}` must be on or off (`true`/`false`, `yes`/`no`, `1`/`0`); got `{value}`."
    )


def parse_count(value: object, setting: str, minimum: int = 1) -> int:
    """Read a whole-number setting that must be at least `minimum`.

    Token counts such as `language_sample_size` use the default minimum of 1;
    character thresholds such as `min_import_chars` pass `minimum=0`.

    Raises:
        ValueError: If the value is not an integer or is below `minimum`.
    """

    expectation = "a positive integer" if minimum >= 1 else "a non-negative integer"
    if isinstance(value, bool):
        raise ValueError(f"`{setting}` must be {expectation}.")
    if isinstance(value, int):
        count = value
    else:
        text = setting_text(value)
        if text is None or _INTEGER_RE.fullmatch(text) is None:
            raise ValueError(f"`{setting}` must be {expectation}.")
        count = int(text)
    if count < minimum:
        raise ValueError(f"`{setting}` must be {expectation}.")
    return count
