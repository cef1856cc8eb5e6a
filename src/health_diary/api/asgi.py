"""ASGI entrypoint for the health diary API."""

from health_diary.api.app import create_app
from health_diary.containers import build_container

app = create_app(build_container())
