"""
Hardpass Configuration
=======================

Dataclass settings persisted as TOML. ``hardpass.toml`` in the project
root is read when no path is given; every key is optional.

References:
    - OWASP Authentication Cheat Sheet -- Password Complexity.
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "hardpass.toml"

_Section = TypeVar("_Section")


@dataclass(slots=True)
class PolicyConfig:
    """Password policy parameters.

    Defaults are the OWASP complexity policy: 3 of 4 character classes,
    10 to 128 characters, at most 2 identical characters in a row, and
    no banned structural topology.
    """

    min_length: int = 10
    max_length: int = 128
    min_complexity_classes: int = 3
    max_consecutive_repeats: int = 2
    enable_topology_check: bool = True
    extra_banned_topologies: list[str] = field(default_factory=list)
    feedback_max_score: int = 0

    def validate(self) -> None:
        """Raise ``ValueError`` when the settings cannot form a policy."""
        if self.min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {self.min_length}")
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) is below "
                f"min_length ({self.min_length})"
            )
        if not 1 <= self.min_complexity_classes <= 4:
            raise ValueError(
                "min_complexity_classes must be between 1 and 4, "
                f"got {self.min_complexity_classes}"
            )
        if self.max_consecutive_repeats < 1:
            raise ValueError(
                "max_consecutive_repeats must be >= 1, "
                f"got {self.max_consecutive_repeats}"
            )
        if not 0 <= self.feedback_max_score <= 4:
            raise ValueError(
                "feedback_max_score must be between 0 and 4, "
                f"got {self.feedback_max_score}"
            )


@dataclass(slots=True)
class GlobalConfig:
    """Logging and output settings."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    output_format: str = "console"
    debug: bool = False


@dataclass(slots=True)
class HardpassConfig:
    """The ``[global]`` and ``[policy]`` sections.

    Usage:
        >>> HardpassConfig.load("hardpass.toml").policy.min_length
        10
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    policy: PolicyConfig = field(default_factory=PolicyConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> HardpassConfig:
        """Read *path*, or the project-root ``hardpass.toml`` when ``None``.

        A missing default file yields the defaults.

        Raises:
            FileNotFoundError: *path* was given and does not exist.
            ValueError: The ``[policy]`` section is inconsistent.
        """
        config_path = _DEFAULT_CONFIG_PATH if path is None else Path(path)
        if not config_path.exists():
            if path is None:
                return cls()
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        config = cls(
            global_settings=_section(GlobalConfig, raw.get("global", {})),
            policy=_section(PolicyConfig, raw.get("policy", {})),
        )
        config.policy.validate()
        return config

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _section(section_type: type[_Section], data: dict[str, Any]) -> _Section:
    # Keys the dataclass does not declare are dropped
    known = {f.name for f in fields(section_type)}  # type: ignore[arg-type]
    return section_type(**{k: v for k, v in data.items() if k in known})


_cached: HardpassConfig | None = None


def get_config(path: str | Path | None = None) -> HardpassConfig:
    """Load once and reuse; passing *path* reloads from that file."""
    global _cached
    if _cached is None or path is not None:
        _cached = HardpassConfig.load(path)
    return _cached
