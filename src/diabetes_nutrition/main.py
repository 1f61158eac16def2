"""Local development server."""

import uvicorn

from diabetes_nutrition.config import Settings


def main() -> None:
    """Serve the API with uvicorn."""
    settings = Settings()
    uvicorn.run(
        "diabetes_nutrition.api.asgi:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "local",
    )


if __name__ == "__main__":
    main()
