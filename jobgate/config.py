"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from jobgate.models.config import JobgateConfig, LogConfig, NomadConfig, PlanConfig


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"JOBGATE_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_empty_task_policy(value: str) -> str:
    valid = {"halt", "skip"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid empty task policy: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> JobgateConfig:
    """Load configuration from JOBGATE_* environment variables."""
    return JobgateConfig(
        nomad=NomadConfig(
            address=_env("NOMAD_ADDR", "http://localhost:4646"),
            token=_env("NOMAD_TOKEN", ""),
            region=_env("NOMAD_REGION", ""),
            namespace=_env("NOMAD_NAMESPACE", ""),
            timeout_seconds=_env_int("NOMAD_TIMEOUT", 10, min_val=1, max_val=120),
        ),
        plan=PlanConfig(
            empty_task_policy=_validate_empty_task_policy(_env("PLAN_EMPTY_TASK_POLICY", "halt")),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
        ),
    )
