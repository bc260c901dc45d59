"""Configuration management module for Suntrack."""

import math
from dataclasses import dataclass, field
from datetime import time
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class LocationConfig:
    """Observer location settings."""

    latitude: float = 35.6812  # Tokyo Station
    longitude: float = 139.7671
    timezone: str = "Asia/Tokyo"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        self.latitude = float(self.latitude)
        self.longitude = float(self.longitude)
        if not (math.isfinite(self.latitude) and -90.0 <= self.latitude <= 90.0):
            raise ValueError("latitude must be between -90 and 90")
        if not (math.isfinite(self.longitude) and -180.0 <= self.longitude <= 180.0):
            raise ValueError("longitude must be between -180 and 180")
        if not self.timezone:
            raise ValueError("timezone must not be empty")


@dataclass
class SamplingConfig:
    """Sun path sampling settings."""

    step_minutes: float = 10.0
    duration_minutes: float = 1440.0  # One full day
    start_time: str = "00:00"  # HH:MM local time

    def __post_init__(self) -> None:
        """Validate configuration values."""
        self.step_minutes = float(self.step_minutes)
        self.duration_minutes = float(self.duration_minutes)
        if not (math.isfinite(self.step_minutes) and self.step_minutes > 0):
            raise ValueError("step_minutes must be positive")
        if not (math.isfinite(self.duration_minutes) and self.duration_minutes >= 0):
            raise ValueError("duration_minutes must be non-negative")
        try:
            parts = self.start_time.split(":")
            if len(parts) != 2:
                raise ValueError()
            hour, minute = int(parts[0]), int(parts[1])
            if not (0 <= hour <= 23 and 0 <= minute <= 59):
                raise ValueError()
        except (ValueError, AttributeError):
            raise ValueError(
                f"start_time must be in HH:MM format (24-hour), got '{self.start_time}'"
            )

    @property
    def start(self) -> time:
        """Window start as a time of day."""
        hour, minute = self.start_time.split(":")
        return time(int(hour), int(minute))


@dataclass
class OutputConfig:
    """Export settings."""

    angle_unit: str = "degrees"  # degrees, radians
    indent: int = 2

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.angle_unit not in ("degrees", "radians"):
            raise ValueError("angle_unit must be 'degrees' or 'radians'")
        if self.indent < 0:
            raise ValueError("indent must be non-negative")


@dataclass
class LoggingConfig:
    """Logging configuration settings."""

    level: str = "INFO"
    file: Optional[Path] = None  # Console only
    max_size_mb: int = 10
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate and convert configuration values."""
        if isinstance(self.file, str):
            self.file = Path(self.file)
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if self.level.upper() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")
        self.level = self.level.upper()


@dataclass
class Config:
    """Main configuration container."""

    location: LocationConfig = field(default_factory=LocationConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create Config from dictionary."""
        location_data = data.get("location", {})
        sampling_data = data.get("sampling", {})
        output_data = data.get("output", {})
        logging_data = data.get("logging", {})

        return cls(
            location=LocationConfig(**location_data),
            sampling=SamplingConfig(**sampling_data),
            output=OutputConfig(**output_data),
            logging=LoggingConfig(**logging_data),
        )

    def to_dict(self) -> dict:
        """Convert Config to dictionary."""
        return {
            "location": {
                "latitude": self.location.latitude,
                "longitude": self.location.longitude,
                "timezone": self.location.timezone,
            },
            "sampling": {
                "step_minutes": self.sampling.step_minutes,
                "duration_minutes": self.sampling.duration_minutes,
                "start_time": self.sampling.start_time,
            },
            "output": {
                "angle_unit": self.output.angle_unit,
                "indent": self.output.indent,
            },
            "logging": {
                "level": self.logging.level,
                "file": str(self.logging.file) if self.logging.file else None,
                "max_size_mb": self.logging.max_size_mb,
                "backup_count": self.logging.backup_count,
            },
        }


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        Config object with loaded or default values.
    """
    # Default config paths to try
    if config_path is None:
        default_paths = [
            Path("config/config.yaml"),
            Path("/etc/suntrack/config.yaml"),
            Path.home() / ".config" / "suntrack" / "config.yaml",
        ]
        for path in default_paths:
            if path.exists():
                config_path = path
                break

    if config_path is None or not config_path.exists():
        return Config()

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    return Config.from_dict(data)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Config object to save.
        config_path: Path to save configuration file.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, allow_unicode=True)
