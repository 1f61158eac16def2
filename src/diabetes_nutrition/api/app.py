"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import (
    FastAPI,
    File,
    Form,
    Header,
    HTTPException,
    Request,
    UploadFile,
    status,
)
from fastapi.responses import JSONResponse

from diabetes_nutrition.api.admin import router as admin_router
from diabetes_nutrition.api.schemas import (
    ChatRequest,
    ManualAnalysisRequest,
    MealLogCreateRequest,
    ProfileUpdateRequest,
)
from diabetes_nutrition.api.serializers import (
    analysis_payload,
    chat_message_payload,
    food_payload,
    meal_log_payload,
    meal_log_view_payload,
    profile_payload,
)
from diabetes_nutrition.app_logging import configure_logging
from diabetes_nutrition.containers import AppContainer
from diabetes_nutrition.domain.meals import MealLogItem
from diabetes_nutrition.services.analysis import AnalysisRequestError
from diabetes_nutrition.services.catalog import FoodNotFoundError
from diabetes_nutrition.services.meal_log import (
    MealLogAccessError,
    MealLogNotFoundError,
    MealLogRequestError,
)
from diabetes_nutrition.services.profile import (
    ProfileNotFoundError,
    ProfileRequestError,
)

_ERROR_STATUS: dict[type[Exception], int] = {
    AnalysisRequestError: status.HTTP_400_BAD_REQUEST,
    MealLogRequestError: status.HTTP_400_BAD_REQUEST,
    ProfileRequestError: status.HTTP_400_BAD_REQUEST,
    FoodNotFoundError: status.HTTP_404_NOT_FOUND,
    MealLogNotFoundError: status.HTTP_404_NOT_FOUND,
    ProfileNotFoundError: status.HTTP_404_NOT_FOUND,
    MealLogAccessError: status.HTTP_403_FORBIDDEN,
}


def _status_for(exc: Exception) -> int:
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def require_user_id(x_user_id: str | None) -> str:
    """Return the caller id or reject the request."""
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


def _optional_user_id(x_user_id: str | None) -> str | None:
    return (x_user_id or "").strip() or None


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    async def service_error(_request: Request, exc: Exception) -> JSONResponse:
        status_code = _status_for(exc)
        logger.info("Request rejected (%s): %s", status_code, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    for error_type in _ERROR_STATUS:
        app.add_exception_handler(error_type, service_error)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/foods")
    async def list_foods(request: Request) -> list[dict[str, object]]:
        """Return the whole food catalog."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.catalog_service.list_foods()
        return [food_payload(food) for food in foods]

    @app.get("/api/foods/{food_id}")
    async def get_food(food_id: int, request: Request) -> dict[str, object]:
        """Return a single catalog food."""
        state_container: AppContainer = request.app.state.container
        return food_payload(state_container.catalog_service.get_food(food_id))

    @app.post("/api/analyze/image")
    async def analyze_image(
        request: Request,
        image: UploadFile | None = File(default=None),
        language: str | None = Form(default=None),
        x_user_id: str | None = Header(default=None),
    ) -> dict[str, object]:
        """Recognize foods in an uploaded photo and evaluate the meal."""
        state_container: AppContainer = request.app.state.container
        if image is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No image file provided",
            )
        max_bytes = state_container.settings.max_image_bytes
        image_bytes = await image.read(max_bytes + 1)
        if len(image_bytes) > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Image exceeds the maximum upload size",
            )
        language = state_container.profile_service.preferred_language(
            _optional_user_id(x_user_id), language
        )
        analysis = await state_container.analysis_service.analyze_image(
            image_bytes, language
        )
        return analysis_payload(analysis)

    @app.post("/api/analyze/manual")
    async def analyze_manual(
        payload: ManualAnalysisRequest,
        request: Request,
        x_user_id: str | None = Header(default=None),
    ) -> dict[str, object]:
        """Evaluate a meal assembled from catalog foods."""
        state_container: AppContainer = request.app.state.container
        language = state_container.profile_service.preferred_language(
            _optional_user_id(x_user_id), payload.language
        )
        analysis = state_container.analysis_service.analyze_manual(
            payload.food_ids, language
        )
        return analysis_payload(analysis)

    @app.get("/api/meal-logs")
    async def list_meal_logs(
        request: Request, x_user_id: str | None = Header(default=None)
    ) -> list[dict[str, object]]:
        """Return the caller's meal log, newest first."""
        user_id = require_user_id(x_user_id)
        state_container: AppContainer = request.app.state.container
        views = state_container.meal_log_service.list_entries(user_id)
        return [meal_log_view_payload(view) for view in views]

    @app.post("/api/meal-logs", status_code=status.HTTP_201_CREATED)
    async def create_meal_logs(
        payload: MealLogCreateRequest,
        request: Request,
        x_user_id: str | None = Header(default=None),
    ) -> list[dict[str, object]]:
        """Log one entry per submitted food."""
        user_id = require_user_id(x_user_id)
        state_container: AppContainer = request.app.state.container
        entries = state_container.meal_log_service.log_foods(
            user_id,
            [
                MealLogItem(
                    food_id=food.food_id, amount_grams=food.amount, notes=food.notes
                )
                for food in payload.foods
            ],
        )
        return [meal_log_payload(entry) for entry in entries]

    @app.delete("/api/meal-logs/{entry_id}")
    async def delete_meal_log(
        entry_id: int,
        request: Request,
        x_user_id: str | None = Header(default=None),
    ) -> dict[str, str]:
        """Delete one of the caller's meal log entries."""
        user_id = require_user_id(x_user_id)
        state_container: AppContainer = request.app.state.container
        state_container.meal_log_service.delete_entry(user_id, entry_id)
        return {"message": "Meal log deleted successfully"}

    @app.post("/api/chat")
    async def chat(
        payload: ChatRequest,
        request: Request,
        x_user_id: str | None = Header(default=None),
    ) -> dict[str, str]:
        """Answer a nutrition question."""
        state_container: AppContainer = request.app.state.container
        user_id = _optional_user_id(x_user_id)
        language = state_container.profile_service.preferred_language(
            user_id, payload.language
        )
        answer = await state_container.chat_orchestrator.chat(
            payload.message, language
        )
        if user_id:
            state_container.chat_history_service.record_turn(
                user_id, payload.message, answer
            )
        return {"answer": answer}

    @app.get("/api/chat/history")
    async def chat_history(
        request: Request, x_user_id: str | None = Header(default=None)
    ) -> list[dict[str, object]]:
        """Return the caller's chat messages oldest first."""
        user_id = require_user_id(x_user_id)
        state_container: AppContainer = request.app.state.container
        messages = state_container.chat_history_service.history(user_id)
        return [chat_message_payload(message) for message in messages]

    @app.get("/api/user/profile")
    async def get_profile(
        request: Request, x_user_id: str | None = Header(default=None)
    ) -> dict[str, object]:
        """Return the caller's profile."""
        user_id = require_user_id(x_user_id)
        state_container: AppContainer = request.app.state.container
        return profile_payload(state_container.profile_service.get_profile(user_id))

    @app.patch("/api/user/profile")
    async def update_profile(
        payload: ProfileUpdateRequest,
        request: Request,
        x_user_id: str | None = Header(default=None),
    ) -> dict[str, object]:
        """Update the caller's profile, creating it on first use."""
        user_id = require_user_id(x_user_id)
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.update_profile(
            user_id, payload.model_dump(exclude_unset=True)
        )
        return profile_payload(profile)

    return app
