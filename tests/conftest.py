"""Shared fixtures: a small petstore-style spec and generator settings."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from dtogen.config import GeneratorConfig
from dtogen.document import ApiDocument
from dtogen.loader import parse_document


# ---------------------------------------------------------------------------
# Spec fixture: covers refs, arrays, dates, tags, query/path params, bodies
# ---------------------------------------------------------------------------

PETSTORE: dict[str, Any] = {
    "openapi": "3.0.3",
    "info": {"title": "Petstore", "version": "1.0.0"},
    "servers": [
        {"url": "https://api.example.com/v1", "description": "Production"},
        {"url": "http://localhost:8080/v1"},
    ],
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "summary": "List all pets",
                "tags": ["pets"],
                "parameters": [
                    {"name": "limit", "in": "query", "description": "Max items", "required": True},
                    {"name": "X-Trace", "in": "header"},
                    {"name": "offset", "in": "query"},
                ],
            },
            "post": {
                "operationId": "createPet",
                "summary": "Create a pet",
                "tags": ["pets"],
                "requestBody": {
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/Pet"},
                        },
                    },
                },
            },
        },
        "/pets/{petId}": {
            "get": {
                "operationId": "showPetById",
                "tags": ["pets"],
            },
            "patch": {
                "operationId": "patchPet",
                "tags": ["pets"],
            },
        },
        "/store/orders": {
            "post": {
                "operationId": "placeOrders",
                "summary": "Place several orders",
                "tags": ["pet-store"],
                "requestBody": {
                    "content": {
                        "application/json": {
                            "schema": {
                                "type": "array",
                                "items": {"$ref": "#/components/schemas/Order"},
                            },
                        },
                    },
                },
            },
        },
        "/users/{id}/orders": {
            "delete": {
                "summary": "",
            },
            "put": {
                "summary": "Replace user orders",
                "requestBody": {
                    "content": {
                        "application/json": {
                            "schema": {"type": "object", "properties": {"a": {"type": "string"}}},
                        },
                    },
                },
            },
        },
        "/health": {
            "get": {"operationId": "health", "tags": ["pets"]},
        },
    },
    "components": {
        "schemas": {
            "Pet": {
                "type": "object",
                "description": "A pet",
                "properties": {
                    "id": {"type": "integer", "format": "int64"},
                    "name": {"type": "string", "description": "Pet name"},
                    "birthday": {"type": "string", "format": "date"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                    "owner": {"$ref": "#/components/schemas/User"},
                },
            },
            "Order": {
                "type": "object",
                "properties": {
                    "placedAt": {"type": "string", "format": "date-time"},
                    "quantity": {"type": "integer"},
                    "price": {"type": "number"},
                },
            },
            "User": {"type": "object"},
            "PetResponseDTO": {
                "type": "object",
                "properties": {
                    "pets": {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}},
                },
            },
        },
    },
}


@pytest.fixture
def petstore_raw() -> dict[str, Any]:
    """A fresh copy of the raw spec mapping."""
    return copy.deepcopy(PETSTORE)


@pytest.fixture
def document(petstore_raw) -> ApiDocument:
    return parse_document(petstore_raw)


@pytest.fixture
def config(tmp_path) -> GeneratorConfig:
    return GeneratorConfig(output_dir=tmp_path)
