"""
Route table

Paths are matched exactly. The table is fixed at import time and registered
once per application; every HTTP method, including extension methods such as
PROPFIND or PURGE, reaches the same handler.
"""
from typing import Callable, Tuple

from fastapi import FastAPI
from fastapi.routing import APIRoute

from .debug import payload
from .health import ping, root_redirect
from .info import version
from .kubernetes import kube_create

ROUTES: Tuple[Tuple[str, Callable], ...] = (
    ("/", root_redirect),
    ("/ping", ping),
    ("/version", version),
    ("/payload", payload),
    ("/kubecreate", kube_create),
)


class AnyMethodRoute(APIRoute):
    """APIRoute that matches on the path alone and never answers 405"""

    def __init__(self, path: str, endpoint: Callable, **kwargs):
        super().__init__(path, endpoint, **kwargs)
        # Starlette skips its method check when no method set is present
        self.methods = None


def register_routes(app: FastAPI, routes: Tuple[Tuple[str, Callable], ...] = ROUTES) -> None:
    for path, endpoint in routes:
        app.router.add_api_route(
            path,
            endpoint,
            include_in_schema=False,
            route_class_override=AnyMethodRoute,
        )
