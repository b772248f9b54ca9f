"""
FastAPI dependencies

Collaborators are built once by create_app() and kept on app.state; the
routes receive them through these functions instead of module globals.
"""
from fastapi import Request

from ..config import Settings
from ..services.kubernetes import PodLauncher
from ..services.storage import Storage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_pod_launcher(request: Request) -> PodLauncher:
    return request.app.state.pod_launcher
