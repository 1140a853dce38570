"""Stable id helpers for content nodes."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[^\w\-.~]")


def slugify(value: str) -> str:
    """Turn a display name into an id segment.

    Whitespace runs become ``-`` and characters outside ``[\\w-.~]`` are
    dropped; case is kept so ``Pet Store`` becomes ``Pet-Store``.
    """
    collapsed = _WHITESPACE_RE.sub("-", value.strip())
    slug = _UNSAFE_RE.sub("", collapsed)
    if slug:
        return slug
    return _WHITESPACE_RE.sub("-", value.strip().lower())


def escape_pointer_token(token: str) -> str:
    """Escape a JSON pointer reference token (RFC 6901)."""
    return token.replace("~", "~0").replace("/", "~1")


def join_id(parent_id: str | None, suffix: str) -> str:
    """Prefix ``suffix`` with ``parent_id`` when there is one."""
    if parent_id:
        return f"{parent_id}/{suffix}"
    return suffix
