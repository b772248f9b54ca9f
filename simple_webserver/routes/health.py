"""Root redirect and backend health probe"""
import logging

from fastapi import Depends
from fastapi.responses import PlainTextResponse, RedirectResponse

from ..core.dependencies import get_storage
from ..services.storage import Storage, StorageError

logger = logging.getLogger(__name__)


async def root_redirect():
    """Send clients to the health probe"""
    return RedirectResponse(url="/ping", status_code=303)


async def ping(storage: Storage = Depends(get_storage)):
    """PING the storage backend and return its reply"""
    try:
        result = await storage.ping()
    except StorageError as e:
        return PlainTextResponse(str(e), status_code=500)
    return PlainTextResponse(f"{result}\n")
