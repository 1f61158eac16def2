"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from diabetes_nutrition.api.schemas import FoodCreateRequest  # noqa: TC001
from diabetes_nutrition.api.serializers import food_payload

if TYPE_CHECKING:
    from diabetes_nutrition.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])
_logger = logging.getLogger(__name__)


def _get_admin_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str | None = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not admin_token or not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health(request: Request) -> dict[str, object]:
    """Admin health check with catalog size."""
    container: AppContainer = request.app.state.container
    return {
        "status": "ok",
        "foods": len(container.catalog_service.list_foods()),
        "storage": container.settings.storage_backend,
    }


@router.post(
    "/foods",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def add_food(payload: FoodCreateRequest, request: Request) -> dict[str, object]:
    """Add a food to the catalog."""
    container: AppContainer = request.app.state.container
    food = container.catalog_service.add_food(
        {
            "name": payload.name,
            "alternate_name": payload.name_en,
            "calories": payload.calories,
            "carbs_g": payload.carbs,
            "protein_g": payload.protein,
            "fat_g": payload.fat,
            "sugar_g": payload.sugar,
            "glycemic_index": payload.glycemic_index,
            "suitability": payload.diabetic_suitability,
            "category": payload.category,
        }
    )
    _logger.info("Catalog food added: id=%s name=%s", food.id, food.name)
    return food_payload(food)
