"""
FastAPI application exposing the greeting endpoint.

Run it directly with ``uvicorn greeting_service.app:app`` or through
``python -m greeting_service``.
"""
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from greeting_service import __version__

# Kept verbatim until the wording is confirmed.
GREETING = "Hello Worl!"

# The root path answers every standard method with the greeting.
ROOT_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def home() -> str:
    """Root endpoint returning the greeting."""
    return GREETING


def create_app() -> FastAPI:
    """Build the application with the root route registered."""
    application = FastAPI(title="Greeting Service", version=__version__)
    application.add_api_route(
        "/",
        home,
        methods=ROOT_METHODS,
        response_class=PlainTextResponse,
    )
    return application


app = create_app()
