# Description: FastAPI application for the Visual Helper service.
#              Captures screens on request, stores exports sent by the design
#              plugin, keeps a capture history, streams periodic Figma captures
#              over SSE, compares captures and answers placement queries.
# Core Lib Links:
# - FastAPI: https://fastapi.tiangolo.com/
# - sse-starlette: https://github.com/sysid/sse-starlette
# - Uvicorn: https://www.uvicorn.org/
# Sample I/O: curl -X POST localhost:3001/capture -d '{"target": "figma"}' -H 'Content-Type: application/json'

import asyncio
import base64
import binascii
import json
import os
import time
from typing import Any, Dict, List

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from sse_starlette.sse import EventSourceResponse
from starlette.concurrency import run_in_threadpool

from visual_helper import __version__
from visual_helper.config import CONFIG
from visual_helper.core.capture import capture_figma_window, capture_screen
from visual_helper.core.constants import HISTORY_PAGE_SIZE
from visual_helper.core.errors import VisualHelperError
from visual_helper.core.image_processing import analyze_image, compare_images
from visual_helper.core.placement import PlacementResult, find_clear_space
from visual_helper.core.utils import ensure_directory, sanitize_name
from visual_helper.server.models import (
    CaptureRequest,
    CompareRequest,
    CompareResponse,
    HealthResponse,
    PlacementRequest,
    VisualFeedbackRequest,
    VisualFeedbackResponse,
)

ENDPOINTS = {
    "POST /capture": "Capture current screen",
    "POST /visual-feedback": "Receive Figma exports",
    "GET /history": "View capture history",
    "GET /monitor": "Real-time monitoring (SSE)",
    "POST /compare": "Compare two images",
    "POST /placement": "Find a clear spot on the canvas",
    "GET /health": "Service health check",
}


class VisualHistory:
    """In-memory record of captures and received exports."""

    def __init__(self):
        self._entries: List[Dict[str, Any]] = []

    def add(self, entry: Dict[str, Any]) -> None:
        self._entries.append(entry)

    def recent(self, count: int = HISTORY_PAGE_SIZE) -> List[Dict[str, Any]]:
        return self._entries[-count:]

    def __len__(self) -> int:
        return len(self._entries)


def decode_export_image(data: str) -> bytes:
    """Decode base64 image data, dropping a '...' truncation marker and fixing padding."""
    data = data.replace("...", "")
    data += "=" * (-len(data) % 4)
    return base64.b64decode(data)


def _capture_with_analysis(target: str, captures_dir: str) -> Dict[str, Any]:
    result = capture_figma_window(captures_dir) if target == "figma" else capture_screen(captures_dir)
    return {
        **result.model_dump(exclude_none=True),
        "analysis": analyze_image(result.filepath),
        "url": f"/captures/{result.filename}",
    }


def _resolve_capture(captures_dir: str, filename: str) -> str:
    # Only bare filenames inside the captures directory are served
    path = os.path.join(captures_dir, os.path.basename(filename))
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail=f"Capture not found: {filename}")
    return path


def create_app(
    captures_dir: str = CONFIG["captures"]["dir"],
    monitor_interval: float = CONFIG["server"]["monitor_interval"],
) -> FastAPI:
    """
    Build the Visual Helper application.

    Args:
        captures_dir: Directory where captures and exports are written and served from
        monitor_interval: Seconds between captures on the /monitor stream

    Returns:
        FastAPI: Configured application
    """
    ensure_directory(captures_dir)

    app = FastAPI(
        title="Visual Helper Service",
        version=__version__,
        description="Captures screens and receives design exports to give visual feedback.",
    )
    app.state.history = VisualHistory()
    app.state.started = time.monotonic()
    app.state.captures_dir = captures_dir
    app.state.monitor_interval = monitor_interval

    # The design plugin runs in a sandboxed iframe with a null origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount("/captures", StaticFiles(directory=captures_dir, check_dir=False), name="captures")

    @app.get("/", summary="Service information")
    def read_root():
        return {"service": app.title, "version": app.version, "endpoints": ENDPOINTS}

    @app.post("/capture", summary="Capture the screen or the Figma window")
    def capture_endpoint(request: CaptureRequest):
        try:
            capture = _capture_with_analysis(request.target, captures_dir)
        except (VisualHelperError, OSError) as e:
            logger.error(f"Capture failed: {e}")
            return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

        app.state.history.add(capture)
        return {"success": True, "capture": capture}

    @app.post("/visual-feedback", response_model=VisualFeedbackResponse, summary="Receive Figma exports")
    def visual_feedback(request: VisualFeedbackRequest):
        saved = []
        try:
            for item in request.exports:
                filename = f"figma_export_{request.timestamp}_{sanitize_name(item.name)}.png"
                with open(os.path.join(captures_dir, filename), "wb") as f:
                    f.write(decode_export_image(item.image))

                saved.append({
                    **item.model_dump(exclude={"image"}, exclude_none=True),
                    "filename": filename,
                    "url": f"/captures/{filename}",
                })
        except (binascii.Error, OSError) as e:
            logger.error(f"Failed to store exports: {e}")
            return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

        app.state.history.add({
            "type": "figma-export",
            "timestamp": request.timestamp,
            "viewport": request.viewport,
            "items": saved,
        })
        logger.info(f"📦 Received {len(request.exports)} Figma exports")

        return VisualFeedbackResponse(success=True, saved=len(saved), urls=[s["url"] for s in saved])

    @app.get("/history", summary="Recent captures and exports")
    def history():
        return {"total": len(app.state.history), "history": app.state.history.recent()}

    @app.get("/monitor", summary="Stream a Figma capture every interval")
    async def monitor(request: Request):
        async def event_generator():
            while True:
                await asyncio.sleep(app.state.monitor_interval)
                if await request.is_disconnected():
                    logger.debug("Monitor client disconnected")
                    break
                try:
                    capture = await run_in_threadpool(capture_figma_window, captures_dir)
                    payload = {
                        "event": "capture",
                        **capture.model_dump(exclude_none=True),
                        "url": f"/captures/{capture.filename}",
                    }
                except (VisualHelperError, OSError) as e:
                    payload = {"event": "error", "error": str(e)}
                yield {"data": json.dumps(payload)}

        return EventSourceResponse(event_generator())

    @app.post("/compare", response_model=CompareResponse, summary="Compare two captures")
    def compare(request: CompareRequest):
        before = _resolve_capture(captures_dir, request.before)
        after = _resolve_capture(captures_dir, request.after)
        try:
            return compare_images(before, after)
        except OSError as e:
            logger.error(f"Comparison failed: {e}")
            raise HTTPException(status_code=422, detail=f"Cannot compare images: {e}")

    @app.post("/placement", response_model=PlacementResult, summary="Find a clear spot on the canvas")
    def placement(request: PlacementRequest):
        return find_clear_space(
            request.width,
            request.height,
            request.occupied,
            padding=request.padding,
            rightmost_by_right_edge=request.rightmost_by_right_edge,
        )

    @app.get("/health", response_model=HealthResponse, summary="Health check")
    def health():
        return HealthResponse(
            status="running",
            captures=len(app.state.history),
            uptime=time.monotonic() - app.state.started,
        )

    return app


def run_server(
    host: str = CONFIG["server"]["host"],
    port: int = CONFIG["server"]["port"],
    captures_dir: str = CONFIG["captures"]["dir"],
    log_level: str = "info",
) -> None:
    """Start the service with uvicorn."""
    app = create_app(captures_dir=captures_dir)

    logger.info(f"🚀 Visual Helper Service running on http://{host}:{port}")
    logger.info("📸 Ready to capture screens and provide visual feedback")
    for endpoint, description in ENDPOINTS.items():
        logger.info(f"  {endpoint} - {description}")

    uvicorn.run(app, host=host, port=port, log_level=log_level)


# Note: To run this application locally, use:
# visual-helper serve --port 3001
