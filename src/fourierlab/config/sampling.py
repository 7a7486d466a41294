"""Sampling configuration and helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..analysis.padding import is_power_of_two, next_power_of_two


DEFAULT_SAMPLING_RATE_HZ = 1000.0
DEFAULT_SAMPLE_COUNT = 512
SAMPLE_COUNT_CHOICES = (64, 128, 256, 512, 1024, 2048)


@dataclass(frozen=True)
class SamplingConfig:
    """
    Sampling rate and window length for one analysis run.

    sampling_rate_hz: samples per second of the time-domain signal.
    sample_count: samples in the window; a power of two for the FFT.
    """

    sampling_rate_hz: float = DEFAULT_SAMPLING_RATE_HZ
    sample_count: int = DEFAULT_SAMPLE_COUNT

    @property
    def duration_s(self) -> float:
        """Length of the window in seconds."""
        return self.sample_count / float(self.sampling_rate_hz)

    @property
    def frequency_resolution_hz(self) -> float:
        """Spacing between adjacent FFT bins."""
        return float(self.sampling_rate_hz) / self.sample_count

    @property
    def nyquist_hz(self) -> float:
        return float(self.sampling_rate_hz) / 2.0

    def validate(self) -> "SamplingConfig":
        """Raise ValueError unless the rate is > 0 and the count a power of two."""
        if not self.sampling_rate_hz > 0:
            raise ValueError(
                f"sampling_rate_hz must be > 0, got {self.sampling_rate_hz}"
            )
        if self.sample_count <= 0:
            raise ValueError(f"sample_count must be > 0, got {self.sample_count}")
        if not is_power_of_two(self.sample_count):
            raise ValueError(
                f"sample_count must be a power of two, got {self.sample_count}"
            )
        return self

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any] | None,
        *,
        default_rate: float = DEFAULT_SAMPLING_RATE_HZ,
        default_count: int = DEFAULT_SAMPLE_COUNT,
    ) -> "SamplingConfig":
        """
        Construct a SamplingConfig from a mapping such as a YAML config.

        Supported shape::

            sampling:
              sampling_rate_hz: 1000
              sample_count: 512

        Unparseable or non-positive values fall back to the defaults and a
        sample count that is not a power of two is rounded up to one.
        """
        payload: Mapping[str, Any] = mapping or {}

        sampling_block = (
            payload.get("sampling") if isinstance(payload, Mapping) else None
        )

        rate_value: Any = default_rate
        count_value: Any = default_count

        if isinstance(sampling_block, Mapping):
            rate_value = sampling_block.get("sampling_rate_hz", rate_value)
            count_value = sampling_block.get("sample_count", count_value)

        try:
            rate = float(rate_value)
        except (TypeError, ValueError):
            rate = float(default_rate)
        if not rate > 0:
            rate = float(default_rate)

        try:
            count = int(count_value)
        except (TypeError, ValueError):
            count = int(default_count)
        if count <= 0:
            count = int(default_count)

        return cls(sampling_rate_hz=rate, sample_count=next_power_of_two(count))

    def to_mapping(self) -> dict:
        """
        Serialize the sampling config back into a mapping suitable for YAML.
        """
        return {
            "sampling": {
                "sampling_rate_hz": float(self.sampling_rate_hz),
                "sample_count": int(self.sample_count),
            }
        }
