"""Runtime configuration for the synthesis / CSV analysis views."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping, Tuple

import yaml

from ..analysis.synthesis import SignalComponent
from .sampling import SAMPLE_COUNT_CHOICES, SamplingConfig

logger = logging.getLogger(__name__)

MIN_SAMPLING_RATE_HZ = 100.0
MAX_SAMPLING_RATE_HZ = 2000.0
DEFAULT_CSV_SAMPLING_RATE_HZ = 100.0
MAX_SIGNAL_COMPONENTS = 5

INITIAL_COMPONENTS: Tuple[SignalComponent, ...] = (
    SignalComponent(frequency_hz=5.0, amplitude=1.0, phase_rad=0.0, label="sig1", color="#8884d8"),
    SignalComponent(frequency_hz=12.0, amplitude=0.5, phase_rad=math.pi / 2, label="sig2", color="#82ca9d"),
)


@dataclass(frozen=True)
class FourierLabConfig:
    """
    Defaults for the interactive synthesis view and the CSV analyzer.

    The synthesis sampling rate is kept within the slider range
    ``MIN_SAMPLING_RATE_HZ .. MAX_SAMPLING_RATE_HZ`` and the sample count
    within :data:`SAMPLE_COUNT_CHOICES`.
    """

    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    csv_sampling_rate_hz: float = DEFAULT_CSV_SAMPLING_RATE_HZ
    max_components: int = MAX_SIGNAL_COMPONENTS
    components: Tuple[SignalComponent, ...] = INITIAL_COMPONENTS

    def sanitized(self) -> FourierLabConfig:
        """Return a copy with derived limits applied."""
        rate = min(MAX_SAMPLING_RATE_HZ, max(MIN_SAMPLING_RATE_HZ, float(self.sampling.sampling_rate_hz)))
        count = min(SAMPLE_COUNT_CHOICES[-1], max(SAMPLE_COUNT_CHOICES[0], int(self.sampling.sample_count)))
        max_components = max(1, int(self.max_components))
        components = tuple(self.components)
        if len(components) > max_components:
            logger.warning(
                "Config lists %d signal components; keeping the first %d",
                len(components),
                max_components,
            )
            components = components[:max_components]
        csv_rate = float(self.csv_sampling_rate_hz)
        if not csv_rate > 0:
            csv_rate = DEFAULT_CSV_SAMPLING_RATE_HZ
        return replace(
            self,
            sampling=SamplingConfig(sampling_rate_hz=rate, sample_count=count),
            csv_sampling_rate_hz=csv_rate,
            max_components=max_components,
            components=components,
        )

    def to_mapping(self) -> dict:
        data = self.sampling.to_mapping()
        data["csv_sampling_rate_hz"] = float(self.csv_sampling_rate_hz)
        data["max_components"] = int(self.max_components)
        data["components"] = [c.to_mapping() for c in self.components]
        return data


def config_from_mapping(data: Mapping[str, Any] | None) -> FourierLabConfig:
    """Build :class:`FourierLabConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return FourierLabConfig()

    kwargs: dict[str, Any] = {"sampling": SamplingConfig.from_mapping(data)}
    if "csv_sampling_rate_hz" in data:
        try:
            kwargs["csv_sampling_rate_hz"] = float(data["csv_sampling_rate_hz"])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid csv_sampling_rate_hz: %r", data["csv_sampling_rate_hz"])
    if "max_components" in data:
        try:
            kwargs["max_components"] = int(data["max_components"])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid max_components: %r", data["max_components"])
    raw_components = data.get("components")
    if raw_components is not None:
        if not isinstance(raw_components, list):
            raise ValueError(
                f"'components' must be a list, got {type(raw_components).__name__}"
            )
        kwargs["components"] = tuple(SignalComponent.from_mapping(item) for item in raw_components)
    return FourierLabConfig(**kwargs).sanitized()


def load_config(path: str | Path | None) -> FourierLabConfig:
    """
    Load configuration from ``path``.

    Missing files fall back to default :class:`FourierLabConfig`.
    """
    if path is None:
        return FourierLabConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.info("Config %s not found; using defaults", cfg_path)
        return FourierLabConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


def save_config(path: str | Path, config: FourierLabConfig) -> None:
    """Write ``config`` to ``path`` as YAML."""
    cfg_path = Path(path)
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    with cfg_path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(
            config.to_mapping(),
            fh,
            default_flow_style=False,
            sort_keys=False,
        )


__all__ = [
    "FourierLabConfig",
    "INITIAL_COMPONENTS",
    "config_from_mapping",
    "load_config",
    "save_config",
]
