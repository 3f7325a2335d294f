"""
geopath.api.routers.paths

Path endpoints for authenticated callers.

Responsibilities:
- Find a single path or a batch of paths for the calling owner.
- Page through the caller's history.
- Fetch (owner or public) and delete (owner only) a stored path.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends, Query

from geopath.api.deps import path_service_dep, settings_dep
from geopath.api.schemas import PathBatchRequest, PathFindRequest
from geopath.auth.deps import get_principal
from geopath.auth.models import Principal
from geopath.domain.errors import ValidationError
from geopath.services.path_service import PathOrchestrationService
from geopath.settings import Settings

router = APIRouter(prefix="/v1/paths", tags=["paths"])


def _now() -> str:
    return datetime.now(UTC).isoformat()


@router.post("/find")
async def find_path(
    body: PathFindRequest,
    principal: Principal = Depends(get_principal),
    service: PathOrchestrationService = Depends(path_service_dep),
) -> dict[str, Any]:
    result = await service.find(body.to_domain(owner_id=principal.subject))
    return {
        "success": True,
        "data": result.as_dict(),
        "algorithm": body.algorithm,
        "timestamp": _now(),
    }


@router.post("/batch")
async def batch_find_paths(
    body: PathBatchRequest,
    principal: Principal = Depends(get_principal),
    service: PathOrchestrationService = Depends(path_service_dep),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any]:
    if len(body.requests) > settings.batch_max_items:
        raise ValidationError(f"Requests must be an array of 1-{settings.batch_max_items} items")

    results = await service.batch_find(
        [r.to_domain(owner_id=principal.subject) for r in body.requests],
        principal.subject,
    )
    return {
        "success": True,
        "data": [r.as_dict() for r in results],
        "count": len(results),
        "timestamp": _now(),
    }


@router.get("/history")
async def path_history(
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    principal: Principal = Depends(get_principal),
    service: PathOrchestrationService = Depends(path_service_dep),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any]:
    page_size = limit if limit is not None else settings.default_page_size
    history = await service.history(principal.subject, page, page_size)
    return {
        "success": True,
        "data": [r.as_dict() for r in history.records],
        "pagination": {
            "page": page,
            "limit": page_size,
            "total": history.total,
            "pages": math.ceil(history.total / page_size),
        },
    }


@router.get("/{path_id}")
async def get_path(
    path_id: str,
    principal: Principal = Depends(get_principal),
    service: PathOrchestrationService = Depends(path_service_dep),
) -> dict[str, Any]:
    record = await service.get(path_id, principal.subject)
    return {"success": True, "data": record.as_dict()}


@router.delete("/{path_id}")
async def delete_path(
    path_id: str,
    principal: Principal = Depends(get_principal),
    service: PathOrchestrationService = Depends(path_service_dep),
) -> dict[str, Any]:
    await service.delete(path_id, principal.subject)
    return {"success": True, "message": "Path deleted successfully"}


# --- Module Notes -----------------------------------------------------------
# `/history` is declared before `/{path_id}` so it is not captured as an id.
