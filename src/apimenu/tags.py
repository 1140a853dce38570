"""Collect tags and the operations filed under each of them."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from apimenu.schemas import OperationRef, TagInfo

logger = logging.getLogger(__name__)

OPERATION_NAMES = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

# Operations without tags are filed under this name.
ANONYMOUS_TAG = ""

TagsInfoMap = dict[str, TagInfo]


def is_operation_name(key: str) -> bool:
    """Return True when a path item key names an HTTP operation."""
    return key in OPERATION_NAMES


def collect_tags(description: Mapping[str, Any]) -> TagsInfoMap:
    """Map each tag name to its metadata and the operations carrying it.

    Declared tags come first in declaration order, followed by tags only
    seen on operations in first-seen order. Operations keep path order, then
    the fixed ``OPERATION_NAMES`` order within a path. Trait tags
    (``x-traitTag``) never collect operations.
    """
    tags: TagsInfoMap = {}
    for declared in _as_list(description.get("tags")):
        if not isinstance(declared, Mapping) or not isinstance(declared.get("name"), str):
            logger.debug("Skipping malformed tag declaration: %r", declared)
            continue
        tags[declared["name"]] = _tag_info(declared)

    paths = description.get("paths") or {}
    for path_name, path_item in paths.items():
        if not isinstance(path_item, Mapping):
            continue
        path_parameters = _parameter_list(path_item.get("parameters"))
        for http_verb in OPERATION_NAMES:
            operation = path_item.get(http_verb)
            if not isinstance(operation, Mapping):
                continue
            operation_tags = _operation_tags(operation)
            for tag_name in operation_tags or [ANONYMOUS_TAG]:
                tag = tags.get(tag_name)
                if tag is None:
                    tag = TagInfo(name=tag_name)
                    tags[tag_name] = tag
                if tag.x_trait_tag:
                    continue
                tag.operations.append(
                    _operation_ref(
                        operation,
                        path_name=str(path_name),
                        http_verb=http_verb,
                        path_parameters=path_parameters,
                        tags=operation_tags,
                    )
                )

    return tags


def find_unused_tags(tags: TagsInfoMap) -> list[str]:
    """Return named, non-trait tags that no explicit tag group referenced."""
    return [
        name
        for name, tag in tags.items()
        if name != ANONYMOUS_TAG and not tag.used and not tag.x_trait_tag
    ]


def _tag_info(declared: Mapping[str, Any]) -> TagInfo:
    data = {key: value for key, value in declared.items() if key not in {"operations", "used"}}
    data["x-traitTag"] = bool(declared.get("x-traitTag"))
    if not isinstance(data.get("description"), str):
        data.pop("description", None)
    if not isinstance(data.get("x-displayName"), str):
        data.pop("x-displayName", None)
    if not isinstance(data.get("externalDocs"), Mapping):
        data.pop("externalDocs", None)
    return TagInfo.model_validate(data)


def _operation_ref(
    operation: Mapping[str, Any],
    *,
    path_name: str,
    http_verb: str,
    path_parameters: list[dict[str, Any]],
    tags: list[str],
) -> OperationRef:
    data = {
        key: value
        for key, value in operation.items()
        if key not in {"path_name", "http_verb", "path_parameters"}
    }
    data.update(
        path_name=path_name,
        http_verb=http_verb,
        path_parameters=list(path_parameters),
        tags=tags,
        parameters=_parameter_list(operation.get("parameters")),
        deprecated=bool(operation.get("deprecated")),
    )
    for field in ("operationId", "summary", "description"):
        if not isinstance(data.get(field), str):
            data.pop(field, None)
    return OperationRef.model_validate(data)


def _operation_tags(operation: Mapping[str, Any]) -> list[str]:
    return [tag for tag in _as_list(operation.get("tags")) if isinstance(tag, str)]


def _parameter_list(value: Any) -> list[dict[str, Any]]:
    return [dict(item) for item in _as_list(value) if isinstance(item, Mapping)]


def _as_list(value: Any) -> Iterable[Any]:
    if isinstance(value, (list, tuple)):
        return value
    return []
