from __future__ import annotations

from fastapi import FastAPI, Request, Response, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import router
from logging_config import configure_logging


async def _not_found(_request: Request, exc: StarletteHTTPException) -> Response:
    # Unknown paths and wrong methods both answer 404 with no body.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=exc.status_code, headers=exc.headers)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="W1 XML Bridge",
        description="Serves DS18B20 one-wire temperature readings as an XML report.",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.add_exception_handler(StarletteHTTPException, _not_found)
    app.include_router(router)
    return app

app = create_app()
