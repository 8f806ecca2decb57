"""
Middleware that injects a request ID into every incoming request.
"""

import uuid

from fastapi import Request

from core.logging import bind_context

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware:
    """Bind the caller's X-Request-ID (or a fresh one) to the log context and echo it back."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive=receive)
        request_id = request.headers.get(REQUEST_ID_HEADER, str(uuid.uuid4()))
        scope.setdefault("state", {})["request_id"] = request_id

        bind_context(request_id=request_id)

        async def send_wrapper(response):
            if response["type"] == "http.response.start":
                headers = response.setdefault("headers", [])
                headers.append((b"x-request-id", request_id.encode()))
            await send(response)

        await self.app(scope, receive, send_wrapper)
