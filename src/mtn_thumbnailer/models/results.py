"""Models for what comes back from mtn: progress, results and metadata."""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass
class ThumbnailProgress:
    """Progress snapshot scraped from mtn's output."""
    current_shot: int
    total_shots: int  # Estimate only, mtn doesn't print the real total
    percentage: float = 0
    current_time: float | None = None
    duration: float | None = None


class ThumbnailResult(BaseModel):
    """Outcome of a single mtn run."""

    model_config = ConfigDict(frozen=True)

    success: bool
    output_path: Optional[str] = None
    info_path: Optional[str] = None
    cover_path: Optional[str] = None
    individual_shots: Optional[List[str]] = None
    web_vtt_path: Optional[str] = None
    execution_time: float = Field(..., ge=0, description="Wall time of the run in seconds")
    output: str = ""
    error: Optional[str] = None
    exit_code: int


class VideoMetadata(BaseModel):
    """Video information scraped from `mtn -v -i`. Unset fields were not found."""
    duration: Optional[float] = None
    width: Optional[int] = None
    height: Optional[int] = None
    codec: Optional[str] = None
    audio_codec: Optional[str] = None
    frame_rate: Optional[float] = None
    bitrate: Optional[int] = Field(None, description="Bitrate in kb/s")
    size: Optional[int] = Field(None, description="File size in bytes")
