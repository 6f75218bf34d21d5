"""ASGI entrypoint for the dish assistant API."""

from dish_assistant.api.app import create_app
from dish_assistant.containers import build_container

app = create_app(build_container())
