"""Mapping of domain failures to transport-level error payloads."""

from .responses import HTTP_STATUS_BY_KIND, ErrorResponse, status_for_kind

__all__ = ["HTTP_STATUS_BY_KIND", "ErrorResponse", "status_for_kind"]
