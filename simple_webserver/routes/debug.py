"""Debug route that dumps the complete request"""
import logging

from fastapi import Depends, Request, Response
from fastapi.responses import PlainTextResponse

from ..config import Settings
from ..core.body import BodyReadError, PayloadTooLargeError, read_body
from ..core.dependencies import get_settings
from ..models import RequestSnapshot

logger = logging.getLogger(__name__)


async def payload(request: Request, settings: Settings = Depends(get_settings)):
    """Echo method, headers and body back to the client"""
    try:
        body = await read_body(request, settings.max_payload_bytes)
    except PayloadTooLargeError:
        return Response(status_code=413)
    except BodyReadError as e:
        logger.warning(f"Payload read failed: {e}")
        return Response(status_code=500)

    snapshot = RequestSnapshot.capture(request, body)
    for line in snapshot.lines():
        logger.info(line.decode("utf-8", errors="replace").rstrip("\n"))

    return PlainTextResponse(snapshot.render())
