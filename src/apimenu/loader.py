"""Load API description documents from disk or over HTTP."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from apimenu.exceptions import DescriptionNotFoundError, ParseError
from apimenu.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://")


def is_url(source: str) -> bool:
    """Return True when ``source`` looks like an HTTP(S) URL."""
    return source.lower().startswith(_URL_SCHEMES)


def parse_description(text: str, *, source: str | None = None) -> dict[str, Any]:
    """Decode a JSON or YAML API description.

    JSON is tried first, YAML second. A missing ``paths`` object becomes
    ``{}``.

    Raises:
        ParseError: If the text is not a mapping that declares ``openapi``
            or ``swagger``, or if ``paths`` is not a mapping.
    """
    label = source or "<string>"
    try:
        document = json.loads(text)
    except ValueError:
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ParseError(f"Could not decode API description from {label}: {exc}") from exc

    return normalize_description(document, source=label)


def normalize_description(document: Any, *, source: str | None = None) -> dict[str, Any]:
    """Check the shape the tree builder relies on and fill in ``paths``.

    Raises:
        ParseError: If ``document`` is not an OpenAPI or Swagger mapping or
            its ``paths`` is not a mapping.
    """
    label = source or "<string>"
    if not isinstance(document, dict):
        raise ParseError(f"API description from {label} is not a mapping")
    if "openapi" not in document and "swagger" not in document:
        raise ParseError(f"API description from {label} declares neither 'openapi' nor 'swagger'")

    paths = document.get("paths")
    if paths is None:
        logger.debug("API description from %s has no paths", label)
        document["paths"] = {}
    elif not isinstance(paths, dict):
        raise ParseError(f"'paths' in API description from {label} is not a mapping")

    return document


def load_description(path: str | Path) -> dict[str, Any]:
    """Read and decode an API description file."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"API description not found: {file_path}")
    return parse_description(file_path.read_text(encoding="utf-8"), source=str(file_path))


async def fetch_description(url: str) -> dict[str, Any]:
    """Download and decode an API description.

    Raises:
        DescriptionNotFoundError: If the server answers 404.
        FetchError: If the download fails after retries.
    """
    text = await fetch_with_retries(
        url,
        on_404=DescriptionNotFoundError,
        on_404_message=f"No API description found at {url}",
    )
    return parse_description(text, source=url)


async def load_source(source: str) -> dict[str, Any]:
    """Load a description from a URL or a local path."""
    if is_url(source):
        return await fetch_description(source)
    return load_description(source)
