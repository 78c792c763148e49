"""Runtime settings resolved from ``BENCHTIMER_*`` environment variables."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from benchtimer.registry import BenchTimer, ExecutionMode
from benchtimer.units import DurationUnit
from benchtimer.utils.env import get_env

ENV_LOG_LEVEL = "BENCHTIMER_LOG_LEVEL"
ENV_UNIT = "BENCHTIMER_UNIT"
ENV_MODE = "BENCHTIMER_MODE"
ENV_MAX_WORKERS = "BENCHTIMER_MAX_WORKERS"


class BenchConfig(BaseModel):
    """Settings for one benchmark session."""

    log_level: str = Field("INFO", description="Logger level name")
    unit: DurationUnit = Field(
        DurationUnit.MILLISECONDS, description="Unit used to render samples"
    )
    mode: ExecutionMode = Field(
        ExecutionMode.CONCURRENT, description="Execution mode for bulk operations"
    )
    max_workers: int | None = Field(
        None, ge=1, description="Thread pool size for concurrent bulk operations"
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: object) -> object:
        if isinstance(value, str):
            return DurationUnit.parse(value)
        return value

    @classmethod
    def from_env(cls) -> BenchConfig:
        """Build a config from the environment, falling back to defaults.

        Raises:
            EnvVarTypeError: If a variable holds an unparseable value.
        """
        return cls(
            log_level=get_env(ENV_LOG_LEVEL, default="INFO"),
            unit=get_env(
                ENV_UNIT, default=DurationUnit.MILLISECONDS, as_type=DurationUnit
            ),
            mode=get_env(
                ENV_MODE, default=ExecutionMode.CONCURRENT, as_type=ExecutionMode
            ),
            max_workers=get_env(ENV_MAX_WORKERS, as_type=int),
        )

    def create_registry(self) -> BenchTimer:
        """Construct an empty BenchTimer using these settings."""
        return BenchTimer(self.unit, max_workers=self.max_workers)
