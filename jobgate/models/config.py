"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class NomadConfig:
    """Nomad API connection configuration."""

    address: str = "http://localhost:4646"
    token: str = ""
    region: str = ""
    namespace: str = ""
    timeout_seconds: int = 10


@dataclass
class PlanConfig:
    """Plan gate configuration."""

    empty_task_policy: str = "halt"


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass
class JobgateConfig:
    """Top-level jobgate configuration."""

    nomad: NomadConfig = field(default_factory=NomadConfig)
    plan: PlanConfig = field(default_factory=PlanConfig)
    log: LogConfig = field(default_factory=LogConfig)
