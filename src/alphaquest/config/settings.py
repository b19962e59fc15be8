"""Configuration settings for AlphaQuest."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

CORAL_RED = "#FF6F61"
SKY_BLUE = "#6ECFF6"


class CurveMode(str, Enum):
    """How curve segments are treated for length and proximity."""

    CHORD = "chord"
    FLATTEN = "flatten"


class LogLevel(str, Enum):
    """Log levels accepted for console and file output."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class GeometryConfig(BaseModel):
    """Configuration for path geometry.

    CHORD treats every curve as the straight line between its endpoints.
    FLATTEN subdivides curves until they are within flatten_tolerance of
    the true curve.
    """

    curve_mode: CurveMode = Field(
        default=CurveMode.CHORD,
        description="Curve approximation used for trace proximity and shape sampling",
    )
    flatten_tolerance: float = Field(
        default=1.0,
        ge=0.05,
        le=10.0,
        description="Maximum distance from the true curve when flattening (canvas units)",
    )


class FillLevelConfig(BaseModel):
    """Configuration for the fill-in level."""

    grid_step: float = Field(
        default=15.0,
        gt=0.0,
        le=100.0,
        description="Spacing of the interior sampling grid",
    )
    padding_fraction: float = Field(
        default=0.2,
        ge=0.0,
        lt=1.0,
        description="Fraction of the canvas left as margin when fitting the outline",
    )
    brush_width: float = Field(
        default=20.0,
        gt=0.0,
        le=200.0,
        description="Default brush diameter",
    )
    brush_color: str = Field(default=CORAL_RED, description="Default brush color")


class TraceLevelConfig(BaseModel):
    """Configuration for the tracing level."""

    grid_step: float = Field(
        default=10.0,
        gt=0.0,
        le=100.0,
        description="Spacing of the sampling grid over the guide's bounding box",
    )
    padding_fraction: float = Field(
        default=0.1,
        ge=0.0,
        lt=1.0,
        description="Fraction of the canvas left as margin when fitting the guide",
    )
    proximity_tolerance: float = Field(
        default=5.0,
        gt=0.0,
        le=50.0,
        description="Maximum distance from the guide for a grid point to count as on-path",
    )
    curve_tolerance_factor: float = Field(
        default=1.5,
        ge=1.0,
        le=5.0,
        description="Proximity widening applied to curve chords in chord mode",
    )
    stroke_buffer: float = Field(
        default=2.0,
        ge=0.0,
        le=20.0,
        description="Extra distance added to half the brush width when testing coverage",
    )
    brush_width: float = Field(default=8.0, gt=0.0, le=200.0, description="Default brush diameter")
    brush_color: str = Field(default=SKY_BLUE, description="Default brush color")


class FreeDrawLevelConfig(BaseModel):
    """Configuration for the free-draw (shape recognition) level."""

    sample_count: int = Field(
        default=20,
        ge=1,
        le=500,
        description="Number of points sampled along the reference path",
    )
    tolerance_multiplier: float = Field(
        default=1.5,
        ge=1.0,
        le=10.0,
        description="Multiplier applied to half the brush width",
    )
    stroke_buffer: float = Field(
        default=2.0,
        ge=0.0,
        le=20.0,
        description="Extra distance added after applying the multiplier",
    )
    padding_fraction: float = Field(
        default=0.2,
        ge=0.0,
        lt=1.0,
        description="Fraction of the canvas left as margin when fitting the reference",
    )
    brush_width: float = Field(default=8.0, gt=0.0, le=200.0, description="Default brush diameter")
    brush_color: str = Field(default=CORAL_RED, description="Default brush color")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class AlphaQuestSettings(BaseModel):
    """Main application settings."""

    fill: FillLevelConfig = Field(default_factory=FillLevelConfig)
    trace: TraceLevelConfig = Field(default_factory=TraceLevelConfig)
    free_draw: FreeDrawLevelConfig = Field(default_factory=FreeDrawLevelConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AlphaQuestSettings:
    """Get default application settings."""
    return AlphaQuestSettings()


class Thresholds(BaseModel):
    """Pass thresholds read by the levels."""

    model_config = {"frozen": True}

    fill_threshold_percent: int = Field(default=80, ge=0, le=100)
    trace_threshold_percent: int = Field(default=80, ge=0, le=100)
    shape_recognition_sensitivity: int = Field(default=80, ge=0, le=100)


class UserSettings(BaseModel):
    """The user's progress and adjustable settings, persisted as one record."""

    completed_letters: set[str] = Field(
        default_factory=set,
        description="Identifiers of completed letters (upper case)",
    )
    fill_threshold_percentage: int = Field(
        default=80,
        ge=0,
        le=100,
        description="Minimum fill percentage to pass the fill level",
    )
    trace_threshold_percentage: int = Field(
        default=80,
        ge=0,
        le=100,
        description="Minimum trace percentage to pass the trace level",
    )
    shape_recognition_sensitivity: int = Field(
        default=80,
        ge=0,
        le=100,
        description="Minimum recognition score to pass the free-draw level",
    )
    is_music_enabled: bool = Field(default=True, description="Background music on/off")
    has_completed_tutorial: bool = Field(default=False, description="Tutorial seen")

    def thresholds(self) -> Thresholds:
        """Project the pass thresholds out of the settings record."""
        return Thresholds(
            fill_threshold_percent=self.fill_threshold_percentage,
            trace_threshold_percent=self.trace_threshold_percentage,
            shape_recognition_sensitivity=self.shape_recognition_sensitivity,
        )
