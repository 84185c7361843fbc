"""
ASGI middleware.

``TrailingSlashMiddleware`` makes a trailing slash optional on every
route: ``/api/users/`` and ``/api/users/1/`` are served by the same
handlers as ``/api/users`` and ``/api/users/1`` instead of being
redirected.  The path as sent is kept in ``scope["original_path"]``.
"""


class TrailingSlashMiddleware:
    """Strip a trailing slash from the request path before routing."""

    def __init__(self, app) -> None:
        self.app = app

    async def __call__(self, scope, receive, send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if len(path) > 1 and path.endswith("/"):
                scope = dict(scope, path=path.rstrip("/") or "/", original_path=path)
        await self.app(scope, receive, send)
