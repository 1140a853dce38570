"""Test setup for apimenu."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


NARRATIVE = "\n".join(
    [
        "A sample pet store.",
        "",
        "# Introduction",
        "Welcome to the pet store.",
        "",
        "## Getting started",
        "Create an account.",
        "",
        "### Details",
        "Not a section of its own.",
        "",
        "# Security",
        "<!-- ReDoc-Inject: <security-definitions> -->",
    ]
)


@pytest.fixture
def narrative() -> str:
    """Markdown narrative with nested headings and a security definitions marker."""
    return NARRATIVE


@pytest.fixture
def petstore() -> dict[str, Any]:
    """A small OpenAPI description exercising tags, traits and untagged operations."""
    return {
        "openapi": "3.0.3",
        "info": {
            "title": "Petstore",
            "version": "1.0.0",
            "description": NARRATIVE,
        },
        "tags": [
            {"name": "pet", "description": "Everything about your pets"},
            {"name": "store", "x-displayName": "Pet Store"},
            {"name": "Schemas", "x-traitTag": True, "description": "Shared models"},
        ],
        "paths": {
            "/pets": {
                "parameters": [{"name": "X-Trace", "in": "header"}],
                "post": {"operationId": "addPet", "tags": ["pet"], "summary": "Add a pet"},
                "get": {"operationId": "listPets", "tags": ["pet", "Schemas"], "summary": "List pets"},
            },
            "/pets/{petId}": {
                "get": {"operationId": "getPet", "tags": ["pet"]},
                "delete": {"tags": ["pet"]},
            },
            "/store/inventory": {
                "get": {"operationId": "getInventory", "tags": ["store"], "x-internal": True},
            },
            "/health": {
                "get": {"operationId": "health", "summary": "Health check"},
            },
            "/users": {
                "get": {"operationId": "listUsers", "tags": ["user"]},
            },
        },
    }


@pytest.fixture
def grouped() -> dict[str, Any]:
    """A description with ``x-tagGroups``: A(t1, t2) and B(t3, tX)."""
    return {
        "openapi": "3.1.0",
        "info": {"title": "Grouped", "version": "2"},
        "tags": [{"name": "t1"}, {"name": "t2"}, {"name": "t3"}, {"name": "t4"}],
        "paths": {
            "/one": {"get": {"operationId": "one", "tags": ["t1"]}},
            "/two": {"get": {"operationId": "two", "tags": ["t2"]}},
            "/three": {"get": {"operationId": "three", "tags": ["t3"]}},
        },
        "x-tagGroups": [
            {"name": "A", "tags": ["t1", "t2"]},
            {"name": "B", "tags": ["t3", "tX"]},
        ],
    }
