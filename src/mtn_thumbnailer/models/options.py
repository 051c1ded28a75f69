"""Pydantic models for mtn configuration."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SaveIndividual(BaseModel):
    """Which individual shots mtn should save next to the contact sheet (-I)."""

    model_config = ConfigDict(extra="forbid")

    thumbnail: bool = False  # t: thumbnail size
    original: bool = False  # o: original size
    ignore_grid: bool = False  # i: don't create the grid

    def codes(self) -> str:
        """Return the one-letter codes for the -I flag, in mtn's order."""
        codes = ""
        if self.thumbnail:
            codes += "t"
        if self.original:
            codes += "o"
        if self.ignore_grid:
            codes += "i"
        return codes


class ThumbnailOptions(BaseModel):
    """Options for a single mtn run.

    Every field is optional. Leaving a field as None lets mtn apply its own
    default. Values are not range checked here; mtn rejects what it can't use.
    """

    model_config = ConfigDict(extra="forbid")

    # Output
    output_dir: Optional[str] = Field(None, description="Output directory (-O)")
    output_suffix: Optional[str] = Field(None, description="Output suffix including extension (-o), e.g. '_preview.jpg'")
    use_full_filename: Optional[bool] = Field(None, description="Keep the input extension in output names (-X)")
    custom_filename: Optional[str] = Field(None, description="Custom output filename base (-x)")
    no_overwrite: Optional[bool] = Field(None, description="Don't overwrite existing files (-W)")

    # Grid
    columns: Optional[int] = Field(None, description="Number of columns (-c)")
    rows: Optional[int] = Field(None, description="Number of rows (-r), 0 = auto")
    step: Optional[int] = Field(None, description="Seconds between shots (-s)")
    min_height: Optional[int] = Field(None, description="Minimum shot height in pixels (-h)")
    width: Optional[int] = Field(None, description="Output image width (-w), 0 = columns * movie width")
    gap: Optional[int] = Field(None, description="Gap between shots in pixels (-g)")

    # Appearance
    font: Optional[str] = Field(None, description="Font file for text (-f)")
    background_color: Optional[str] = Field(None, description="Background color as hex (-k), e.g. 'FFFFFF'")
    jpeg_quality: Optional[int] = Field(None, description="JPEG quality 1-100 (-j)")
    show_info: Optional[bool] = Field(None, description="Show info text; False passes -i")
    show_timestamp: Optional[bool] = Field(None, description="Show timestamps; False passes -t")
    additional_text: Optional[str] = Field(None, description="Additional text above the image (-T)")
    info_suffix: Optional[str] = Field(None, description="Info text file suffix (-N)")

    # Detection
    edge_detection: Optional[int] = Field(None, description="Edge detection level (-D), 0 = off")
    blank_threshold: Optional[float] = Field(None, description="Blank threshold (-b), 0-1")

    # Timing
    skip_beginning: Optional[float] = Field(None, description="Seconds skipped at the beginning (-B)")
    skip_end: Optional[float] = Field(None, description="Seconds skipped at the end (-E)")
    cut_duration: Optional[float] = Field(None, description="Cut the movie to this many seconds (-C)")

    # Streams
    video_stream: Optional[int] = Field(None, description="Video stream index (-S)")

    # Modes
    verbose: Optional[bool] = Field(None, description="Verbose mode (-v)")
    quiet: Optional[bool] = Field(None, description="Quiet mode (-q)")
    seek_mode: Optional[bool] = Field(None, description="Always use seek mode (-z)")
    non_seek_mode: Optional[bool] = Field(None, description="Always use non-seek mode (-Z)")

    # Advanced
    aspect_ratio: Optional[float] = Field(None, description="Override aspect ratio (-a), e.g. 1.3333")
    shadow: Optional[Union[bool, int, float]] = Field(None, description="Shadow radius (--shadow); True uses mtn's default")
    transparent: Optional[bool] = Field(None, description="Transparent background, PNG only (--transparent)")
    extract_cover: Optional[bool] = Field(None, description="Extract album art (--cover)")
    web_vtt: Optional[str] = Field(None, description="Export a WebVTT file (--vtt)")
    filters: Optional[str] = Field(None, description="FFmpeg filter chain (--filters)")
    tonemap: Optional[bool] = Field(None, description="Tonemap HDR movies (--tonemap)")

    # Directories
    depth: Optional[int] = Field(None, description="Recursion depth for directories (-d)")
    extensions: Optional[List[str]] = Field(None, description="File extensions to process (-e)")

    # Individual shots
    save_individual: Optional[SaveIndividual] = Field(None, description="Save individual shots (-I)")
