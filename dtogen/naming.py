"""Derive Java identifiers from tags and paths.

Examples:
  tag  "pet-store"            -> PetStoreService
  tag  "pets"                 -> PetsService
  tag  "user accounts"        -> UserAccountsService
  path "/users/{id}/orders"   -> USERS_BY_ID_ORDERS
  path "/store/order-items"   -> STORE_ORDER_ITEMS

Constant names are not checked for collisions: "/a-b" and "/a/b" both
become A_B.
"""

from __future__ import annotations

import re

SERVICE_SUFFIX = "Service"

# Placed before a path parameter's name in constant names
PATH_PARAM_MARKER = "BY_"

_TAG_SEPARATORS = re.compile(r"[-\s]+")
_PATH_PARAM = re.compile(r"\{([^}]+)\}")


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def service_base_name(tag: str) -> str:
    """Return the PascalCase form of a tag, without the service suffix."""
    if "-" in tag or " " in tag:
        parts = [p for p in _TAG_SEPARATORS.split(tag) if p]
        return "".join(p[:1].upper() + p[1:].lower() for p in parts)
    return _capitalize_first(tag)


def class_name_from_tag(tag: str) -> str:
    """Build a service class name from an operation tag."""
    return service_base_name(tag) + SERVICE_SUFFIX


def constant_name_from_path(path: str) -> str:
    """Build a SCREAMING_SNAKE constant name from an API path."""
    if path.startswith("/"):
        path = path[1:]
    path = _PATH_PARAM.sub(lambda m: PATH_PARAM_MARKER + m.group(1), path)
    path = path.replace("/", "_").replace("-", "_")
    return path.upper()
