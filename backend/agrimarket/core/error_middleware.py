import traceback

from agrimarket.core.logger import logger


class ExceptionLoggingMiddleware:
    """
    Logs exceptions that escaped every handler, with the request id set by
    RequestLoggingMiddleware, then re-raises so Starlette answers 500.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        try:
            await self.app(scope, receive, send)
        except Exception:
            logger.error(
                "Unhandled exception in request",
                extra={
                    "request_id": scope.get("request_id"),
                    "method": scope.get("method"),
                    "path": scope.get("path"),
                    "traceback": traceback.format_exc(),
                },
            )
            raise
