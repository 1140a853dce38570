"""Tests for tag collection."""

from __future__ import annotations

from typing import Any

from apimenu.tags import (
    ANONYMOUS_TAG,
    OPERATION_NAMES,
    collect_tags,
    find_unused_tags,
    is_operation_name,
)


class TestIsOperationName:
    """Tests for is_operation_name function."""

    def test_accepts_every_http_method(self) -> None:
        """All eight OpenAPI operation keys are recognized."""
        for name in ("get", "put", "post", "delete", "options", "head", "patch", "trace"):
            assert is_operation_name(name)

    def test_is_case_sensitive(self) -> None:
        """Upper-case method names are not operations."""
        assert not is_operation_name("GET")

    def test_rejects_path_item_fields(self) -> None:
        """Shared path item fields are not operations."""
        assert not is_operation_name("parameters")
        assert not is_operation_name("summary")
        assert not is_operation_name("x-extension")


class TestCollectTags:
    """Tests for collect_tags function."""

    def test_declared_tags_come_first(self, petstore: dict[str, Any]) -> None:
        """Declared tags keep declaration order, discovered tags follow."""
        tags = collect_tags(petstore)

        assert list(tags) == ["pet", "store", "Schemas", ANONYMOUS_TAG, "user"]

    def test_declared_metadata_is_kept(self, petstore: dict[str, Any]) -> None:
        """Description and vendor fields of declared tags survive."""
        tags = collect_tags(petstore)

        assert tags["pet"].description == "Everything about your pets"
        assert tags["store"].x_display_name == "Pet Store"
        assert tags["Schemas"].x_trait_tag is True

    def test_operations_follow_path_then_verb_order(self, petstore: dict[str, Any]) -> None:
        """Operations are ordered by path, then by the fixed verb order."""
        tags = collect_tags(petstore)

        keys = [operation.key for operation in tags["pet"].operations]
        assert keys == [
            ("/pets", "get"),
            ("/pets", "post"),
            ("/pets/{petId}", "get"),
            ("/pets/{petId}", "delete"),
        ]

    def test_verb_order_is_fixed(self) -> None:
        """Verb order does not depend on the order of keys in the path item."""
        description = {
            "paths": {
                "/items": {verb: {"tags": ["items"]} for verb in reversed(OPERATION_NAMES)},
            }
        }

        tags = collect_tags(description)

        assert [operation.http_verb for operation in tags["items"].operations] == list(OPERATION_NAMES)

    def test_trait_tag_never_collects_operations(self, petstore: dict[str, Any]) -> None:
        """Operations tagged with a trait tag are not filed under it."""
        tags = collect_tags(petstore)

        assert tags["Schemas"].operations == []
        assert [operation.operation_id for operation in tags["pet"].operations][0] == "listPets"

    def test_untagged_operations_use_anonymous_tag(self, petstore: dict[str, Any]) -> None:
        """Operations without tags are filed under the empty tag name."""
        tags = collect_tags(petstore)

        assert [operation.operation_id for operation in tags[ANONYMOUS_TAG].operations] == ["health"]

    def test_empty_tag_list_is_anonymous(self) -> None:
        """An empty ``tags`` array counts as no tags."""
        description = {"paths": {"/ping": {"get": {"tags": []}}}}

        tags = collect_tags(description)

        assert list(tags) == [ANONYMOUS_TAG]

    def test_operation_is_duplicated_per_tag(self) -> None:
        """An operation with two tags is filed under both."""
        description = {"paths": {"/a": {"get": {"operationId": "a", "tags": ["x", "y"]}}}}

        tags = collect_tags(description)

        assert tags["x"].operations[0].key == tags["y"].operations[0].key == ("/a", "get")

    def test_operation_ref_carries_path_context(self, petstore: dict[str, Any]) -> None:
        """Each entry records its path, verb and the path-level parameters."""
        tags = collect_tags(petstore)

        list_pets = tags["pet"].operations[0]
        assert list_pets.path_name == "/pets"
        assert list_pets.http_verb == "get"
        assert list_pets.path_parameters == [{"name": "X-Trace", "in": "header"}]
        assert list_pets.summary == "List pets"

        get_pet = tags["pet"].operations[2]
        assert get_pet.path_parameters == []

    def test_extra_operation_fields_are_kept(self, petstore: dict[str, Any]) -> None:
        """Vendor extensions on operations stay available."""
        tags = collect_tags(petstore)

        assert tags["store"].operations[0].extensions == {"x-internal": True}

    def test_declared_tag_without_operations(self) -> None:
        """Declared tags without operations have an empty operation list."""
        description = {"tags": [{"name": "lonely"}], "paths": {}}

        tags = collect_tags(description)

        assert tags["lonely"].operations == []

    def test_skips_malformed_entries(self) -> None:
        """Malformed tag declarations, path items and operations are ignored."""
        description = {
            "tags": [{"description": "no name"}, "oops", {"name": "ok"}],
            "paths": {
                "/broken": None,
                "/odd": {"get": "not an operation", "post": {"tags": "not-a-list"}},
            },
        }

        tags = collect_tags(description)

        assert list(tags) == ["ok", ANONYMOUS_TAG]
        assert tags[ANONYMOUS_TAG].operations[0].key == ("/odd", "post")

    def test_missing_paths_yields_declared_tags_only(self) -> None:
        """A description without paths still returns its declared tags."""
        tags = collect_tags({"tags": [{"name": "a"}]})

        assert list(tags) == ["a"]


class TestFindUnusedTags:
    """Tests for find_unused_tags function."""

    def test_lists_named_tags_not_marked_used(self, petstore: dict[str, Any]) -> None:
        """Unused named tags are reported; anonymous and trait tags are not."""
        tags = collect_tags(petstore)
        tags["pet"].used = True

        assert find_unused_tags(tags) == ["store", "user"]
