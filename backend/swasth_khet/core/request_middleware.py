import time
import uuid

from swasth_khet.core.logger import logger


def generate_request_id() -> str:
    return str(uuid.uuid4())


class RequestLoggingMiddleware:
    """
    ASGI middleware: tags every HTTP request with an X-Request-ID,
    logs it on the way in and logs status + duration on the way out.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request_id = generate_request_id()
        scope["request_id"] = request_id

        method = scope.get("method", "")
        path = scope.get("path", "")
        context = {"request_id": request_id, "method": method, "path": path}

        start = time.perf_counter()
        logger.info("Incoming request", extra=context)

        status_holder = {"status": None}

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_holder["status"] = message.get("status", 0)
                message["headers"] = list(message.get("headers", [])) + [
                    (b"x-request-id", request_id.encode("utf-8"))
                ]
            await send(message)

        await self.app(scope, receive, send_wrapper)

        logger.info(
            "Request completed",
            extra={
                **context,
                "status_code": status_holder["status"],
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
