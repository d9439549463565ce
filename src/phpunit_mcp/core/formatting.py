"""Text shaping and serialization helpers for token-efficient output.

Design principles:
- Messages are cut once, at a word or line boundary where possible
- Paths and class names are shortened only where a mode asks for it
- The final string is produced by a single pluggable encoder
"""

from __future__ import annotations

import json
import posixpath
from collections.abc import Callable
from typing import Any

StructuredEncoder = Callable[[Any], str]
"""Serializes a nested dict/list structure into the final output string."""


def encode_compact(data: Any) -> str:
    """Default structured-text encoder: compact JSON.

    Examples:
        {"status": "OK", "tests": 3} -> '{"status":"OK","tests":3}'
    """
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def truncate_at_word(text: str, max_len: int = 40, suffix: str = "...") -> str:
    """Truncate text at word boundary.

    Args:
        text: Text to truncate
        max_len: Maximum length including suffix
        suffix: Suffix to append if truncated

    Examples:
        "fix: update parser to handle edge cases" -> "fix: update parser to..."
    """
    if len(text) <= max_len:
        return text

    cut_at = max_len - len(suffix)
    if cut_at <= 0:
        return suffix[:max_len]

    space_idx = text.rfind(" ", 0, cut_at)
    if space_idx > 0:
        return text[:space_idx] + suffix

    # No space found, hard cut
    return text[:cut_at] + suffix


def truncate_message(text: str, max_len: int = 200, suffix: str = "...") -> str:
    """Truncate a multi-line runner message to at most ``max_len`` characters.

    Leading/trailing whitespace is dropped first. When the message is too
    long, a cut at the last line break is preferred as long as it keeps at
    least half of the budget; otherwise the cut falls back to a word boundary.

    Examples:
        "Failed asserting that 404 is identical to 200." -> unchanged
    """
    text = text.strip()
    if len(text) <= max_len:
        return text

    cut_at = max_len - len(suffix)
    if cut_at <= 0:
        return suffix[:max_len]

    newline_idx = text.rfind("\n", 0, cut_at)
    if newline_idx >= cut_at // 2:
        return text[:newline_idx].rstrip() + suffix

    return truncate_at_word(text, max_len, suffix)


def short_class_name(qualified: str) -> str:
    """Last namespace segment of a PHP class name.

    Examples:
        App\\Tests\\UserTest -> UserTest
        UserTest -> UserTest
    """
    return qualified.rsplit("\\", 1)[-1]


def base_name(path: str) -> str:
    """File name portion of a path reported by the runner (POSIX or Windows).

    Examples:
        /x/tests/UserTest.php -> UserTest.php
        C:\\x\\UserTest.php -> UserTest.php
    """
    return posixpath.basename(path.replace("\\", "/"))


def format_seconds(seconds: float) -> str:
    """Render a duration rounded to 3 decimals with trailing zeros dropped.

    Examples:
        5.5678 -> "5.568s"
        5.0 -> "5s"
        0.0 -> "0s"
    """
    text = f"{round(seconds, 3):.3f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        text = "0"
    return f"{text}s"


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Returns:
        Formatted string like "1 test" or "3 tests"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"
