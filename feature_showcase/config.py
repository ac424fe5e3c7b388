"""Configuration dataclasses for the feature showcase."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Union
from enum import Enum


class LogFormat(Enum):
    """Output format for diagnostic logging."""
    TEXT = "text"
    JSON = "json"


@dataclass
class CounterConfig:
    """Settings for the lock-object demo.

    Attributes:
        workers: Number of threads incrementing the shared counter
        increments_per_worker: Increments each thread performs
        resource_users: Names that take turns on the shared resource
        resource_hold_seconds: Simulated work while holding the resource
    """
    workers: int = 5
    increments_per_worker: int = 100
    resource_users: List[str] = field(default_factory=lambda: ["User 1", "User 2"])
    resource_hold_seconds: float = 0.01

    def __post_init__(self):
        if self.workers < 0:
            raise ValueError(f"workers must be >= 0, got {self.workers}")
        if self.increments_per_worker < 0:
            raise ValueError(
                f"increments_per_worker must be >= 0, got {self.increments_per_worker}"
            )
        if self.resource_hold_seconds < 0:
            raise ValueError(
                f"resource_hold_seconds must be >= 0, got {self.resource_hold_seconds}"
            )

    @property
    def expected_total(self) -> int:
        return self.workers * self.increments_per_worker


@dataclass
class ShowcaseConfig:
    """Global configuration for a showcase run.

    Attributes:
        counter: Settings for the synchronized counter demo
        log_level: Level name or logging constant for diagnostics (stderr)
        log_format: Text or JSON log lines
        log_file: Optional file that also receives log lines
    """
    counter: CounterConfig = field(default_factory=CounterConfig)
    log_level: Union[str, int] = "WARNING"
    log_format: LogFormat = LogFormat.TEXT
    log_file: Optional[Path] = None

    def __post_init__(self):
        """Coerce strings to their typed forms."""
        if isinstance(self.log_format, str):
            self.log_format = LogFormat(self.log_format.lower())
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
        if isinstance(self.log_level, str):
            self.log_level = self.log_level.upper()

    @property
    def json_logs(self) -> bool:
        return self.log_format is LogFormat.JSON
