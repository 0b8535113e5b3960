# src/telemetry_metrics/core/config.py
"""
Compiler settings and loading.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from telemetry_metrics.contracts.config.defaults import DEFAULT_NATIVE_TICKS_PER_SECOND
from telemetry_metrics.core.units import UnitTables


class CompilerSettings(BaseModel):
    """Settings shared by every compilation.

    Example YAML:
        native_ticks_per_second: 1000000000
        log_level: DEBUG
        json_logs: false
    """

    model_config = {"frozen": True, "extra": "forbid"}

    native_ticks_per_second: int = Field(
        default=DEFAULT_NATIVE_TICKS_PER_SECOND,
        gt=0,
        description="Length of the 'native' time unit, as ticks per second of the event clock",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level passed to configure_logging()",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines instead of console output",
    )

    def unit_tables(self) -> UnitTables:
        """Scale tables for the unit converter."""
        return UnitTables.with_native(self.native_ticks_per_second)


DEFAULT_SETTINGS = CompilerSettings()


def load_settings(config_path: Path) -> CompilerSettings:
    """Load settings from a YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (TELEMETRY_METRICS_*) - highest priority
    2. Config file
    3. Defaults from the Pydantic schema - lowest priority

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated CompilerSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="TELEMETRY_METRICS",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
    )

    # Dynaconf returns uppercase keys and mixes in its own bookkeeping
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return CompilerSettings(**raw_config)
