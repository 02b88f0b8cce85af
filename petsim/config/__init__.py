"""Configuration package for the petsim engines.

Tunable constants are grouped by engine (genetics.py, decay.py) and bundled
into the dataclasses in engine_config.py, which are what the engines accept.
"""

from petsim.config.engine_config import (
    DEFAULT_DECAY_CONFIG,
    DEFAULT_ENGINE_CONFIG,
    DEFAULT_GENETICS_CONFIG,
    DecayConfig,
    EngineConfig,
    GeneticsConfig,
)

__all__ = [
    "DecayConfig",
    "EngineConfig",
    "GeneticsConfig",
    "DEFAULT_DECAY_CONFIG",
    "DEFAULT_ENGINE_CONFIG",
    "DEFAULT_GENETICS_CONFIG",
]
