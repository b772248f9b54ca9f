"""Pod creation trigger"""
import logging

from fastapi import Depends, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from ..config import Settings
from ..core.body import BodyReadError, PayloadTooLargeError, read_body
from ..core.dependencies import get_pod_launcher, get_settings
from ..services.kubernetes import PodCreationError, PodLauncher

logger = logging.getLogger(__name__)


async def kube_create(
    request: Request,
    settings: Settings = Depends(get_settings),
    launcher: PodLauncher = Depends(get_pod_launcher),
):
    """Create a pod; the request body is read and discarded"""
    try:
        await read_body(request, settings.max_payload_bytes)
    except PayloadTooLargeError:
        return Response(status_code=413)
    except BodyReadError as e:
        logger.warning(f"Body read failed: {e}")
        return Response(status_code=500)

    # The kubernetes client is blocking
    try:
        pods = await run_in_threadpool(launcher.create_pod)
    except PodCreationError as e:
        logger.error(f"Pod creation failed: {e}")
        return PlainTextResponse(str(e), status_code=500)

    return PlainTextResponse(f"Pods: {pods}")
