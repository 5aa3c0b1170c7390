"""Group operation descriptors into one service model per tag.

Operations are collected path by path in document order, GET, POST, PUT
and DELETE only. All services share the host and base path of the first
declared server.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .document import ApiDocument, Server
from .errors import MissingServerError
from .models import OperationDescriptor, ServiceModel
from .naming import class_name_from_tag, service_base_name
from .operations import build_operation

logger = logging.getLogger(__name__)


def split_server_url(url: str) -> tuple[str, str]:
    """Split a server URL into (host, base path) at the first '/' after '//'.

    >>> split_server_url("https://api.example.com/v1")
    ('https://api.example.com', '/v1')
    """
    index = url.find("/", url.find("//") + 2)
    if index == -1:
        return url, ""
    return url[:index], url[index:]


def collect_operations(document: ApiDocument) -> list[OperationDescriptor]:
    """Build a descriptor for every supported operation in the document."""
    descriptors = []
    for path, path_item in document.paths.items():
        for method in path_item.unsupported_methods():
            logger.debug("Skipping unsupported method %s %s", method, path)
        for method, operation in path_item.operations():
            descriptors.append(build_operation(operation, path, method))
    return descriptors


def group_by_tag(
    descriptors: Sequence[OperationDescriptor],
) -> tuple[tuple[str, tuple[OperationDescriptor, ...]], ...]:
    """Group descriptors by tag, keeping first-seen tag order."""
    tags = dict.fromkeys(d.tag for d in descriptors)
    return tuple(
        (tag, tuple(d for d in descriptors if d.tag == tag))
        for tag in tags
    )


def aggregate_services(
    descriptors: Sequence[OperationDescriptor],
    servers: Sequence[Server],
) -> list[ServiceModel]:
    """Build one ServiceModel per tag."""
    groups = group_by_tag(descriptors)
    if not groups:
        return []
    if not servers:
        raise MissingServerError()

    host, base_path = split_server_url(servers[0].url)
    return [
        ServiceModel(
            class_name=class_name_from_tag(tag),
            base_name=service_base_name(tag),
            host=host,
            base_path=base_path,
            operations=operations,
        )
        for tag, operations in groups
    ]


def build_services(document: ApiDocument) -> list[ServiceModel]:
    return aggregate_services(collect_operations(document), document.servers)
