# src/visual_helper/server/models.py

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from visual_helper.config import CONFIG
from visual_helper.core.geometry import OccupiedRegion


class CaptureRequest(BaseModel):
    target: str = Field("screen", description="'figma' captures the Figma window, anything else the screen.")


class ExportItem(BaseModel):
    name: str = Field(..., description="Name of the exported node.")
    type: Optional[str] = Field(None, description="Node type, e.g. FRAME.")
    bounds: Optional[Dict[str, float]] = Field(None, description="Absolute bounding box of the node.")
    image: str = Field(..., description="Base64 PNG data, possibly ending in a '...' truncation marker.")


class VisualFeedbackRequest(BaseModel):
    exports: List[ExportItem] = Field(default_factory=list)
    viewport: Optional[Dict[str, Any]] = Field(None, description="Viewport bounds and zoom at export time.")
    timestamp: int = Field(..., description="Export time in epoch milliseconds.")


class VisualFeedbackResponse(BaseModel):
    success: bool
    saved: int
    urls: List[str]


class CompareRequest(BaseModel):
    before: str = Field(..., description="Filename of the reference capture.")
    after: str = Field(..., description="Filename of the capture to compare.")


class CompareResponse(BaseModel):
    similarity: float
    differences: List[Dict[str, int]]
    analysis: str


class PlacementRequest(BaseModel):
    width: float = Field(..., gt=0, description="Width of the artifact to place.")
    height: float = Field(..., gt=0, description="Height of the artifact to place.")
    occupied: List[OccupiedRegion] = Field(default_factory=list, description="Regions already on the canvas.")
    padding: float = Field(CONFIG["placement"]["padding"], ge=0, description="Clearance around the placement.")
    rightmost_by_right_edge: bool = Field(
        False, description="Anchor the right-hand fallback on the largest right edge."
    )


class HealthResponse(BaseModel):
    status: str
    captures: int
    uptime: float
