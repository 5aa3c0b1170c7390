"""Build the BasePathURLs and RelativeURLs constant tables."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .context_builder import split_server_url
from .document import PathItem, Server
from .models import ConstantEntry
from .naming import constant_name_from_path

DEFAULT_SERVER_CONSTANT = "DEFAULT"
DEFAULT_SERVER_DESCRIPTION = "Default server"


def _server_constant_name(index: int) -> str:
    return DEFAULT_SERVER_CONSTANT if index == 0 else f"SERVER_{index}"


def build_base_path_table(servers: Sequence[Server]) -> list[ConstantEntry]:
    """One entry per server, holding the base path of its URL."""
    return [
        ConstantEntry(
            constant_name=_server_constant_name(i),
            value=split_server_url(server.url)[1],
            description=server.description or DEFAULT_SERVER_DESCRIPTION,
        )
        for i, server in enumerate(servers)
    ]


def _path_description(path: str, path_item: PathItem) -> str:
    for _, operation in path_item.operations():
        if operation.summary:
            return operation.summary
    return f"Path: {path}"


def build_relative_url_table(paths: Mapping[str, PathItem]) -> list[ConstantEntry]:
    """One entry per path, described by the first operation summary found."""
    return [
        ConstantEntry(
            constant_name=constant_name_from_path(path),
            value=path,
            description=_path_description(path, path_item),
        )
        for path, path_item in paths.items()
    ]
