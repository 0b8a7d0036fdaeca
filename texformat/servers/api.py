#!/usr/bin/env python3
"""
FastAPI server for texformat.

Accepts a DOCX paper and a LaTeX template, has a generation provider
typeset the paper, and returns the LaTeX with renumbered references.

Endpoints:
    GET  /              - Server status
    POST /api/format    - Format a paper (multipart form)

Form fields for /api/format:
    paper     - DOCX file (required)
    template  - LaTeX template file (required)
    figures   - Figure files (optional, up to 100)
    apiKey    - Provider API key (optional if configured server-side)
    provider  - "groq" or "gemini" (optional, defaults to config)

Usage:
    # Development
    python -m texformat.servers.api

    # Production (via uvicorn)
    uvicorn texformat.servers.api:app --host 127.0.0.1 --port 3000
"""

import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import FastAPI, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from texformat import __version__
from texformat.config import config
from texformat.core.constants import MAX_FIGURES
from texformat.errors import ExtractionError, MissingAPIKeyError, TexformatError
from texformat.service import format_paper

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("texformat.api")

# -----------------------------------------------------------------------------
# App setup
# -----------------------------------------------------------------------------

app = FastAPI(
    title="texformat API",
    description="Format DOCX papers into LaTeX templates using an LLM",
    version=__version__,
)

# The browser frontend is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------


class StatusResponse(BaseModel):
    """Server status response."""

    status: str
    timestamp: str


class FigureResponse(BaseModel):
    """Uploaded figure and its placeholder filename in the LaTeX."""

    name: str
    placeholder: str = Field(description="Filename used in \\includegraphics")
    index: int


class FormatResponse(BaseModel):
    """Successful formatting response."""

    success: bool = True
    latex: str
    figures: List[FigureResponse]


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the {"success": false, "error": ...} body clients expect."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------


@app.get("/", response_model=StatusResponse)
async def status():
    """Report that the server is up."""
    return StatusResponse(
        status="Server is running!",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@app.post("/api/format", response_model=FormatResponse)
async def format_endpoint(
    paper: Optional[UploadFile] = File(default=None),
    template: Optional[UploadFile] = File(default=None),
    figures: Optional[List[UploadFile]] = File(default=None),
    apiKey: Optional[str] = Form(default=None),
    provider: Optional[str] = Form(default=None),
):
    """Format an uploaded paper with an uploaded template."""
    logger.info("Received formatting request...")

    if paper is None or template is None:
        return error_response(400, "Both paper and template files are required")

    figures = figures or []
    if len(figures) > MAX_FIGURES:
        return error_response(400, f"At most {MAX_FIGURES} figures are allowed")

    paper_bytes = await paper.read()
    template_bytes = await template.read()
    figure_names = [f.filename or f"figure{i}" for i, f in enumerate(figures, 1)]

    try:
        result = await run_in_threadpool(
            format_paper,
            paper_bytes,
            template_bytes,
            figure_names,
            provider=provider,
            api_key=apiKey,
            settings=config,
        )
    except (MissingAPIKeyError, ExtractionError) as e:
        return error_response(400, str(e))
    except TexformatError as e:
        logger.error("Formatting failed: %s", e)
        return error_response(500, str(e))
    except Exception as e:
        logger.exception("Unexpected error while formatting")
        return error_response(500, str(e))

    return FormatResponse(
        latex=result.latex,
        figures=[
            FigureResponse(name=f.name, placeholder=f.placeholder, index=f.index)
            for f in result.figures
        ],
    )


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------


if __name__ == "__main__":
    import uvicorn

    print("Starting texformat API server...")
    print(f"Config source: {config.config_source}")
    print(f"Groq: {config.groq_model}")
    print(f"Gemini: {config.gemini_model}")
    print(f"API endpoint: http://{config.host}:{config.port}/api/format")
    print()

    uvicorn.run(
        "texformat.servers.api:app",
        host=config.host,
        port=config.port,
        reload=False,
        log_level="info",
    )
