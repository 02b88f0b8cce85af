"""Logging setup for petsim entry points.

The package is split into engines whose log volume differs a lot: the
genetics engine logs every mutation at debug, the decay engine logs once per
critical transition, and the services log once per batch. Each engine can
therefore get its own level on top of the package-wide one.

Levels resolve in this order: explicit argument, environment variable
(``PETSIM_LOG_LEVEL`` for the package, ``PETSIM_<ENGINE>_LOG_LEVEL`` per
engine), then INFO / the package level.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Mapping, Tuple

from petsim.exceptions import ConfigurationError

PACKAGE_LOGGER = "petsim"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Engine name -> loggers it owns
ENGINE_LOGGERS: Dict[str, Tuple[str, ...]] = {
    "genetics": ("petsim.genetics", "petsim.evolution", "petsim.catalog"),
    "decay": ("petsim.decay",),
    "services": ("petsim.services",),
}


def _resolve_level(raw: str | int, source: str) -> int:
    if isinstance(raw, int):
        return raw
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level {raw!r} from {source}")
    return level


def configure_logging(
    level: str | int | None = None,
    *,
    engine_levels: Mapping[str, str | int] | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Configure the ``petsim`` logger tree.

    Args:
        level: Package-wide level; falls back to ``PETSIM_LOG_LEVEL`` or INFO.
        engine_levels: Per-engine overrides keyed by ``genetics``, ``decay``
            or ``services``; an engine without one reads
            ``PETSIM_<ENGINE>_LOG_LEVEL`` and otherwise inherits the package level.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The package logger.

    Raises:
        ConfigurationError: On an unknown engine or level name.
    """
    engine_levels = dict(engine_levels or {})
    unknown = sorted(set(engine_levels) - set(ENGINE_LOGGERS))
    if unknown:
        raise ConfigurationError(f"Unknown engines for logging: {unknown}")

    if level is not None:
        package_level = _resolve_level(level, "argument")
    else:
        package_level = _resolve_level(os.getenv("PETSIM_LOG_LEVEL", "INFO"), "PETSIM_LOG_LEVEL")

    logging.basicConfig(level=package_level, format=format, datefmt=datefmt)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(package_level)

    for engine, logger_names in ENGINE_LOGGERS.items():
        env_var = f"PETSIM_{engine.upper()}_LOG_LEVEL"
        if engine in engine_levels:
            engine_level = _resolve_level(engine_levels[engine], f"engine_levels[{engine!r}]")
        elif os.getenv(env_var):
            engine_level = _resolve_level(os.environ[env_var], env_var)
        else:
            # Inherit from the package logger
            engine_level = logging.NOTSET
        for name in logger_names:
            logging.getLogger(name).setLevel(engine_level)

    package_logger.debug("Logging configured at %s", logging.getLevelName(package_level))
    return package_logger
