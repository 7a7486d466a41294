"""Configuration objects and helpers for FourierLab.

This package knows how to load/save the YAML file that seeds the analysis
views:
- ``sampling:`` block with the synthesis rate and window length
  (see :mod:`sampling`)
- CSV analyzer sampling rate, the component cap and the initial sinusoids
  (see :mod:`runtime`)
"""

from .runtime import FourierLabConfig, config_from_mapping, load_config, save_config
from .sampling import SamplingConfig

__all__ = [
    "FourierLabConfig",
    "SamplingConfig",
    "config_from_mapping",
    "load_config",
    "save_config",
]
