"""ASGI entrypoint for the diabetes nutrition API."""

from diabetes_nutrition.api.app import create_app
from diabetes_nutrition.containers import build_container

app = create_app(build_container())
