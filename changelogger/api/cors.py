"""CORS Middleware — permissive headers on every response, OPTIONS short-circuit.

Invariants:
    - Every response carries Allow-Origin, Allow-Methods and Allow-Headers,
      including 500s from exceptions no registered handler claimed
    - Any OPTIONS request returns 204 with no body before routing runs

Design Decisions:
    - Own middleware over starlette CORSMiddleware: the latter only answers preflights that
      carry Origin + Access-Control-Request-Method, and echoes 200 instead of 204
    - Unhandled exceptions answered here: the Exception handler runs in ServerErrorMiddleware,
      outside this layer, so its response would miss the headers
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET, POST, PATCH, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization"


def cors_headers(allow_origin: str = "*") -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def register_cors(app: FastAPI, allow_origin: str = "*") -> None:
    """Attach the CORS middleware to app."""
    headers = cors_headers(allow_origin)

    @app.middleware("http")
    async def permissive_cors(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(
                status_code=status.HTTP_204_NO_CONTENT, headers=headers,
            )
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
                extra={"path": request.url.path, "method": request.method},
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "An unexpected error occurred"},
                headers=headers,
            )
        response.headers.update(headers)
        return response
