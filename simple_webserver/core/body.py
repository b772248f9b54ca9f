"""Request body reading for the debug routes"""
from starlette.requests import ClientDisconnect, Request


class BodyReadError(Exception):
    """The request body stream failed before it was fully read"""


class PayloadTooLargeError(BodyReadError):
    def __init__(self, limit: int):
        super().__init__(f"request body exceeds {limit} bytes")
        self.limit = limit


async def read_body(request: Request, limit: int = 0) -> bytes:
    """
    Read the whole request body into memory.

    With a positive `limit`, reading stops with PayloadTooLargeError as soon
    as more than `limit` bytes have arrived.
    """
    chunks = []
    size = 0
    try:
        async for chunk in request.stream():
            size += len(chunk)
            if limit and size > limit:
                raise PayloadTooLargeError(limit)
            chunks.append(chunk)
    except ClientDisconnect as e:
        raise BodyReadError("client disconnected while sending the body") from e
    return b"".join(chunks)
