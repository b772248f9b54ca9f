"""Version info"""
from fastapi.responses import PlainTextResponse

from ..version import VERSION_STRING


async def version():
    return PlainTextResponse(f"{VERSION_STRING}\n")
