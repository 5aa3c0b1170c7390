"""Turn one path + method + operation into an OperationDescriptor."""

from __future__ import annotations

import logging

from .document import Operation, RequestBody
from .models import OperationDescriptor, PathParam, QueryParam
from .naming import constant_name_from_path
from .schema_parser import reference_type_name

logger = logging.getLogger(__name__)

DEFAULT_TAG = "Api"
JSON_MEDIA_TYPE = "application/json"


def extract_path_params(path: str) -> tuple[PathParam, ...]:
    """Collect ``{name}`` segments in the order they appear."""
    params = []
    for segment in path.split("/"):
        if len(segment) > 2 and segment.startswith("{") and segment.endswith("}"):
            params.append(PathParam(name=segment[1:-1], placeholder_token=segment))
    return tuple(params)


def extract_query_params(operation: Operation) -> tuple[QueryParam, ...]:
    return tuple(
        QueryParam(name=p.name, description=p.description, required=p.required)
        for p in operation.parameters
        if p.location == "query"
    )


def resolve_request_body(request_body: RequestBody | None) -> tuple[str | None, bool]:
    """Return (body type name, is array) for a JSON request body.

    Only a direct $ref or an array of $ref items is resolved; other body
    shapes leave the type unset.
    """
    if request_body is None:
        return None, False
    media = request_body.content.get(JSON_MEDIA_TYPE)
    schema = media.schema_node if media is not None else None
    if schema is None:
        return None, False

    if schema.type == "array":
        items = schema.items
        if items is not None and items.reference is not None:
            return reference_type_name(items.reference), True
    elif schema.reference is not None:
        return reference_type_name(schema.reference), False

    logger.debug("Request body schema has no $ref; leaving body type unresolved")
    return None, False


def build_operation(operation: Operation, path: str, http_method: str) -> OperationDescriptor:
    """Describe a single API call for the service templates."""
    body_type, is_array_body = resolve_request_body(operation.request_body)
    return OperationDescriptor(
        operation_id=operation.operation_id,
        summary=operation.summary,
        path=path,
        http_method=http_method.upper(),
        path_constant_name=constant_name_from_path(path),
        path_params=extract_path_params(path),
        query_params=extract_query_params(operation),
        has_request_body=operation.request_body is not None,
        request_body_type_name=body_type,
        is_array_request_body=is_array_body,
        tag=operation.tags[0] if operation.tags else DEFAULT_TAG,
    )
