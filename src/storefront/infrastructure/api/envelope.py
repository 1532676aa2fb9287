"""The response envelope every storefront endpoint returns.

``{success, message?, data?, pagination?}``. The client depends on this
shape only, never on endpoint-specific business fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int

    @staticmethod
    def from_api(raw: dict[str, Any]) -> Pagination:
        return Pagination(
            page=int(raw.get("page", 1)),
            limit=int(raw.get("limit", 0)),
            total=int(raw.get("total", 0)),
            total_pages=int(raw.get("totalPages", 0)),
        )


@dataclass(frozen=True)
class ApiEnvelope:
    success: bool
    data: Any = None
    message: str | None = None
    pagination: Pagination | None = None

    @staticmethod
    def from_json(body: Any) -> ApiEnvelope:
        if not isinstance(body, dict):
            # Bare payloads (e.g. CSV exports) are wrapped as data
            return ApiEnvelope(success=True, data=body)
        pagination = body.get("pagination")
        return ApiEnvelope(
            success=bool(body.get("success", True)),
            data=body.get("data"),
            message=body.get("message"),
            pagination=Pagination.from_api(pagination) if isinstance(pagination, dict) else None,
        )
