"""JARK AI Platform — FastAPI Application.

This module defines the FastAPI application factory, the generation routes,
and the ``main()`` CLI function that launches the uvicorn server.

Architecture
------------
The application is a stateless facade over a generative-AI service:

- **Configuration** comes from :class:`~jark.core.config.JarkConfig`.
- **Prompts** are rendered by :mod:`jark.api.prompt_builder`.
- **Upstream calls** go through a
  :class:`~jark.core.generation_client.GenerationClient` injected at
  construction time and stored on ``app.state``.  Routes resolve it through
  a FastAPI dependency, so tests can pass a stub to :func:`create_app`.
- **Engines** share one pipeline (:func:`run_engine`): render prompt, call
  upstream, map the :class:`~jark.core.generation_client.GenerationResult`
  to either a success body or a fixed error message.

Endpoints
---------
========  ================  ==========================================
Method    Path              Purpose
========  ================  ==========================================
GET       ``/health``       Plaintext liveness message
POST      ``/api/brand``    Brand strategy text (``{"data": ...}``)
POST      ``/api/content``  Content plan text (``{"data": ...}``)
POST      ``/api/logo``     Logo image URL (``{"image": ...}``)
========  ================  ==========================================

Any other path or method answers ``404`` with a plaintext body.

Usage
-----
CLI (installed entry point)::

    jark

Direct invocation::

    python -m jark.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from jark import __version__
from jark.api.models import BrandRequest, ContentRequest, LogoRequest
from jark.api.prompt_builder import PROMPT_BUILDERS
from jark.core.config import JarkConfig, config
from jark.core.generation_client import (
    GenerationClient,
    GenerationResult,
    OpenAIGenerationClient,
)

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "JARK AI Platform is running ✅"
NOT_FOUND_MESSAGE = "Not found"


# ---------------------------------------------------------------------------
# Engine pipeline.
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Engine:
    """Everything that distinguishes one generation endpoint from another.

    Attributes:
        name: Engine name used in log lines (``brand``, ``content``, ``logo``).
        request_model: Pydantic model the request body is read into.
        build_prompt: Renders the prompt from the engine's request model.
        call_upstream: Sends the prompt through a :class:`GenerationClient`.
        result_field: :class:`GenerationResult` attribute holding the value.
        response_key: JSON key the value is returned under.
        error_message: Fixed message returned to the caller on failure.
    """

    name: str
    request_model: type[BaseModel]
    build_prompt: Callable[[Any], str]
    call_upstream: Callable[[GenerationClient, str], Awaitable[GenerationResult]]
    result_field: str
    response_key: str
    error_message: str


def build_engines(cfg: JarkConfig) -> dict[str, Engine]:
    """Build the engine table for an application.

    Args:
        cfg: Configuration supplying the per-engine temperatures.

    Returns:
        Mapping of engine name to :class:`Engine`.
    """
    return {
        "brand": Engine(
            name="brand",
            request_model=BrandRequest,
            build_prompt=PROMPT_BUILDERS["brand"],
            call_upstream=lambda client, prompt: client.complete_text(
                prompt, temperature=cfg.brand_temperature
            ),
            result_field="text",
            response_key="data",
            error_message="Branding generation failed",
        ),
        "content": Engine(
            name="content",
            request_model=ContentRequest,
            build_prompt=PROMPT_BUILDERS["content"],
            call_upstream=lambda client, prompt: client.complete_text(
                prompt, temperature=cfg.content_temperature
            ),
            result_field="text",
            response_key="data",
            error_message="Content generation failed",
        ),
        "logo": Engine(
            name="logo",
            request_model=LogoRequest,
            build_prompt=PROMPT_BUILDERS["logo"],
            call_upstream=lambda client, prompt: client.generate_image(prompt),
            result_field="image_url",
            response_key="image",
            error_message="Logo generation failed",
        ),
    }


async def run_engine(engine: Engine, payload: dict[str, Any], client: GenerationClient) -> Any:
    """Render a prompt, call upstream, and shape the HTTP response.

    Args:
        engine: The engine to run.
        payload: The decoded JSON request body, possibly empty.
        client: The upstream generation client.

    Returns:
        ``{response_key: value}`` on success, or a 500 :class:`JSONResponse`
        carrying ``engine.error_message``.  The upstream error itself is
        logged, never returned.
    """
    req = engine.request_model.model_validate(payload)
    logger.info(f"{engine.name} request: {req.model_dump(by_alias=True)}")

    prompt = engine.build_prompt(req)
    result = await engine.call_upstream(client, prompt)

    if not result.ok:
        logger.error(f"{engine.name} generation failed: {result.error}", exc_info=result.error)
        return JSONResponse(status_code=500, content={"error": engine.error_message})

    return {engine.response_key: getattr(result, engine.result_field)}


# ---------------------------------------------------------------------------
# Dependencies.
# ---------------------------------------------------------------------------


def get_generation_client(request: Request) -> GenerationClient:
    """Return the generation client installed on the application."""
    return request.app.state.generation_client


def get_engines(request: Request) -> dict[str, Engine]:
    """Return the engine table installed on the application."""
    return request.app.state.engines


async def read_json_object(request: Request) -> dict[str, Any]:
    """Return the request body as a JSON object, or ``{}``.

    Only JSON content types are decoded.  Form posts, plain text, malformed
    JSON, and JSON that is not an object all read as an empty body, so the
    request still renders a prompt with every field ``undefined``.
    """
    content_type = request.headers.get("content-type", "")
    if "json" not in content_type.lower():
        return {}
    try:
        payload = await request.json()
    except ValueError:
        logger.debug("Ignoring request body that is not valid JSON.")
        return {}
    return payload if isinstance(payload, dict) else {}


def _json_body(model: type[BaseModel]) -> dict[str, Any]:
    # The body is read by read_json_object, so document it for OpenAPI here.
    return {
        "requestBody": {
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    """Liveness probe.  Always 200, independent of upstream state."""
    return HEALTH_MESSAGE


@router.post("/api/brand", openapi_extra=_json_body(BrandRequest))
async def generate_brand(
    payload: dict[str, Any] = Depends(read_json_object),
    client: GenerationClient = Depends(get_generation_client),
    engines: dict[str, Engine] = Depends(get_engines),
) -> Any:
    """Generate a brand strategy.

    Renders the branding-strategist prompt and requests a completion at
    the brand temperature.

    Returns:
        ``{"data": text}``, or 500 ``{"error": "Branding generation failed"}``.
    """
    return await run_engine(engines["brand"], payload, client)


@router.post("/api/content", openapi_extra=_json_body(ContentRequest))
async def generate_content(
    payload: dict[str, Any] = Depends(read_json_object),
    client: GenerationClient = Depends(get_generation_client),
    engines: dict[str, Engine] = Depends(get_engines),
) -> Any:
    """Generate a content plan for an existing brand blueprint.

    Returns:
        ``{"data": text}``, or 500 ``{"error": "Content generation failed"}``.
    """
    return await run_engine(engines["content"], payload, client)


@router.post("/api/logo", openapi_extra=_json_body(LogoRequest))
async def generate_logo(
    payload: dict[str, Any] = Depends(read_json_object),
    client: GenerationClient = Depends(get_generation_client),
    engines: dict[str, Engine] = Depends(get_engines),
) -> Any:
    """Generate a logo image.

    Returns:
        ``{"image": url}``, or 500 ``{"error": "Logo generation failed"}``.
    """
    return await run_engine(engines["logo"], payload, client)


async def _not_found_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and known paths with the wrong method both answer 404.
    if exc.status_code in (404, 405):
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
    return await http_exception_handler(request, exc)


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage the generation client lifecycle.

    On startup:
        Builds an :class:`OpenAIGenerationClient` from ``app.state.config``
        unless a client was injected through :func:`create_app`.

    On shutdown:
        Closes the client this lifespan created.  Injected clients belong to
        the caller and are left open.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    owns_client = app.state.generation_client is None
    if owns_client:
        app.state.generation_client = OpenAIGenerationClient.from_config(app.state.config)
        logger.info("Generation client initialised.")

    yield

    if owns_client:
        await app.state.generation_client.aclose()
        app.state.generation_client = None
        logger.info("Generation client closed on shutdown.")


def create_app(
    cfg: JarkConfig | None = None,
    client: GenerationClient | None = None,
) -> FastAPI:
    """Create a configured FastAPI application.

    Args:
        cfg: Configuration to use.  Defaults to the global ``config``.
        client: Generation client to use.  When omitted, the lifespan
            builds an :class:`OpenAIGenerationClient` on startup.

    Returns:
        The FastAPI application.
    """
    cfg = cfg or config

    app = FastAPI(
        title="JARK AI Platform",
        description="Brand, content and logo generation over a generative-AI service.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = cfg
    app.state.engines = build_engines(cfg)
    app.state.generation_client = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _not_found_handler)
    app.include_router(router)

    return app


app = create_app()


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~jark.core.config.config`
    (``JARK_SERVER_HOST``, ``PORT``/``JARK_SERVER_PORT``, ``JARK_LOG_LEVEL``).
    Defaults to ``0.0.0.0:3000``.

    This function is registered as the ``jark`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"JARK AI Platform running on port {config.server_port}")

    uvicorn.run(
        "jark.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
