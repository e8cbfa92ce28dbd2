# views/utils.py
"""
Shared tooling for the support API views:
- drf-spectacular helpers (error schemas, path params)
- Result / missing-row translation to HTTP responses
- store access for APIView classes
"""
from typing import Any, Dict

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiResponse, inline_serializer,
)
from rest_framework import serializers, status
from rest_framework.response import Response

from support.services.results import ErrorCode, Result
from support.store import IssueTrackingStore, get_store

# ---- Reusable error schemas
ErrorSerializer = inline_serializer(
    name="Error",
    fields={"error": serializers.CharField()}
)

ValidationErrorSerializer = inline_serializer(
    name="ValidationErrors",
    fields={"errors": serializers.DictField(child=serializers.ListField(child=serializers.CharField()))}
)


def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)


def std_errors(extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    errs = {
        400: OpenApiResponse(ValidationErrorSerializer, description="Validation failed"),
        403: OpenApiResponse(ErrorSerializer, description="Not authenticated"),
        404: OpenApiResponse(ErrorSerializer, description="Not Found"),
    }
    if extra:
        errs.update(extra)
    return errs


# ---- Responses
def not_found(entity: str) -> Response:
    return Response(
        {'error': f'{entity} not found'},
        status=status.HTTP_404_NOT_FOUND
    )


def error_response(result: Result, entity: str) -> Response:
    if result.error is ErrorCode.NOT_FOUND:
        return not_found(entity)
    return Response(
        {'errors': result.errors},
        status=status.HTTP_400_BAD_REQUEST
    )


def request_attrs(request) -> Dict[str, Any]:
    """Flatten request.data (JSON dict or form QueryDict) into a plain attrs map."""
    data = request.data
    if hasattr(data, "dict"):
        return data.dict()
    # a JSON array or scalar body carries no attrs
    return dict(data) if isinstance(data, dict) else {}


class StoreMixin:
    def get_store(self) -> IssueTrackingStore:
        return get_store()


__all__ = [
    "extend_schema", "extend_schema_view", "OpenApiResponse",
    "ErrorSerializer", "ValidationErrorSerializer",
    "path_int", "std_errors",
    "not_found", "error_response", "request_attrs",
    "StoreMixin",
]
