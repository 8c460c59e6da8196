"""
Request body size limit.

Product images may be embedded as ``data:image/...`` URIs, so bodies are
large but bounded by ``settings.max_body_bytes``.  A declared
``Content-Length`` above the limit is rejected before the application
runs; bodies without one (chunked uploads) are counted while the
endpoint reads them.
"""

import logging

from fastapi import HTTPException
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .config import settings

logger = logging.getLogger(__name__)

TOO_LARGE = "Request body too large"


class BodySizeLimitMiddleware:
    """ASGI middleware answering 413 for request bodies over the limit."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = settings.max_body_bytes
        content_length = dict(scope["headers"]).get(b"content-length", b"")
        if content_length.isdigit() and int(content_length) > limit:
            logger.warning("Rejected %s %s: body of %s bytes", scope["method"], scope["path"], content_length.decode())
            response = JSONResponse(status_code=413, content={"detail": TOO_LARGE})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    logger.warning("Rejected %s %s: streamed body over %d bytes", scope["method"], scope["path"], limit)
                    # Rendered by the app's HTTPException handler.
                    raise HTTPException(status_code=413, detail=TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)
