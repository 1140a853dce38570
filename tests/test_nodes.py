"""Tests for content node factories and id helpers."""

from __future__ import annotations

from apimenu.context import BuildOptions
from apimenu.ids import escape_pointer_token, join_id, slugify
from apimenu.nodes import merge_parameters, operation_node, tag_group, tag_group_group
from apimenu.schemas import OperationRef, TagGroup, TagInfo


class TestSlugify:
    """Tests for slugify function."""

    def test_replaces_whitespace_and_keeps_case(self) -> None:
        """Spaces become dashes; case is preserved."""
        assert slugify("Pet Store") == "Pet-Store"
        assert slugify("  many   spaces ") == "many-spaces"

    def test_drops_unsafe_characters(self) -> None:
        """Punctuation outside the id alphabet is removed."""
        assert slugify("What's new?") == "Whats-new"
        assert slugify("v1.2_beta~x") == "v1.2_beta~x"

    def test_keeps_unicode_letters(self) -> None:
        """Non-ASCII word characters are kept."""
        assert slugify("Über Uns") == "Über-Uns"

    def test_falls_back_when_nothing_is_left(self) -> None:
        """A name made only of dropped characters falls back to the raw text."""
        assert slugify("!!") == "!!"
        assert slugify("") == ""


class TestIdHelpers:
    """Tests for pointer escaping and id joining."""

    def test_escape_pointer_token(self) -> None:
        """Slashes and tildes are escaped per RFC 6901."""
        assert escape_pointer_token("/pets/{id}") == "~1pets~1{id}"
        assert escape_pointer_token("/a~b") == "~1a~0b"

    def test_join_id(self) -> None:
        """Parent ids prefix the suffix when present."""
        assert join_id("tag/pet", "operation/x") == "tag/pet/operation/x"
        assert join_id(None, "operation/x") == "operation/x"
        assert join_id("", "operation/x") == "operation/x"


class TestGroupFactories:
    """Tests for group node factories."""

    def test_tag_group_uses_display_name(self) -> None:
        """x-displayName replaces the tag name as title but not in the id."""
        tag = TagInfo.model_validate(
            {"name": "store", "x-displayName": "Pet Store", "externalDocs": {"url": "https://example.com"}}
        )

        node = tag_group(tag, parent_id="group/Shop", depth=1)

        assert node.type == "tag"
        assert node.id == "tag/store"
        assert node.title == "Pet Store"
        assert node.parent_id == "group/Shop"
        assert node.external_docs == {"url": "https://example.com"}

    def test_tag_group_group(self) -> None:
        """Tag groups get a ``group/`` id and no parent."""
        node = tag_group_group(TagGroup(name="User Management", tags=["users"]), depth=0)

        assert node.type == "group"
        assert node.id == "group/User-Management"
        assert node.depth == 0
        assert node.parent_id is None
        assert node.items == []


class TestOperationNode:
    """Tests for operation_node function."""

    def test_id_from_operation_id(self) -> None:
        """Operations with an operationId use it in the id."""
        ref = OperationRef(path_name="/pets", http_verb="get", operationId="listPets", summary="List")

        node = operation_node(ref, parent_id="tag/pet", depth=2, options=BuildOptions())

        assert node.id == "tag/pet/operation/listPets"
        assert node.title == "List"
        assert node.operation_id == "listPets"
        assert node.kind == "operation"

    def test_id_from_pointer(self) -> None:
        """Operations without an operationId use their escaped path."""
        ref = OperationRef(path_name="/pets/{petId}", http_verb="delete")

        node = operation_node(ref, parent_id=None, depth=2, options=BuildOptions())

        assert node.id == "paths/~1pets~1{petId}/delete"
        assert node.title == "DELETE /pets/{petId}"

    def test_title_falls_back_to_operation_id(self) -> None:
        """Without a summary the operationId is the title."""
        ref = OperationRef(path_name="/pets", http_verb="post", operationId="addPet")

        node = operation_node(ref, parent_id=None, depth=2, options=BuildOptions())

        assert node.title == "addPet"

    def test_extensions_follow_option(self) -> None:
        """x-* fields are copied only with show_extensions."""
        ref = OperationRef.model_validate(
            {"path_name": "/a", "http_verb": "get", "x-badge": "beta", "responses": {}}
        )

        hidden = operation_node(ref, parent_id=None, depth=2, options=BuildOptions())
        shown = operation_node(ref, parent_id=None, depth=2, options=BuildOptions(show_extensions=True))

        assert hidden.extensions == {}
        assert shown.extensions == {"x-badge": "beta"}

    def test_serializes_with_aliases(self) -> None:
        """Dumping by alias restores the OpenAPI field names."""
        ref = OperationRef(path_name="/a", http_verb="get", operationId="a")

        data = operation_node(ref, parent_id=None, depth=2, options=BuildOptions()).model_dump(by_alias=True)

        assert data["operationId"] == "a"
        assert data["kind"] == "operation"


class TestMergeParameters:
    """Tests for merge_parameters function."""

    def test_operation_parameter_overrides_path_parameter(self) -> None:
        """A parameter with the same name and location is replaced."""
        path_params = [{"name": "id", "in": "path", "description": "old"}, {"name": "trace", "in": "header"}]
        op_params = [{"name": "id", "in": "path", "description": "new"}]

        merged = merge_parameters(path_params, op_params)

        assert merged == [{"name": "trace", "in": "header"}, {"name": "id", "in": "path", "description": "new"}]

    def test_same_name_other_location_is_kept(self) -> None:
        """Parameters only collide when the location matches too."""
        merged = merge_parameters([{"name": "id", "in": "query"}], [{"name": "id", "in": "path"}])

        assert len(merged) == 2

    def test_references_are_kept(self) -> None:
        """Unresolved references are never treated as duplicates."""
        ref = {"$ref": "#/components/parameters/Limit"}

        assert merge_parameters([ref], [ref]) == [ref, ref]
