from swasth_khet.core.logger import logger


class ExceptionLoggingMiddleware:
    """
    Logs any exception escaping the route handlers together with the
    request id assigned by RequestLoggingMiddleware, then re-raises it
    so Starlette still produces the 500 response.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        try:
            await self.app(scope, receive, send)
        except Exception:
            logger.exception(
                "Unhandled exception in request",
                extra={
                    "request_id": scope.get("request_id"),
                    "method": scope.get("method"),
                    "path": scope.get("path"),
                },
            )
            raise
