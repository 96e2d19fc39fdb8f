import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_ENV_PREFIX = "SEQOPS_"


@dataclass(frozen=True)
class SeqOpsConfig:
    """library-wide settings, read from SEQOPS_* environment variables by default"""
    # seed for shuffle() when no rng is passed; None draws fresh entropy every call
    shuffle_seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'SeqOpsConfig':
        seed = os.environ.get(f"{_ENV_PREFIX}SHUFFLE_SEED")
        level = os.environ.get(f"{_ENV_PREFIX}LOG_LEVEL", cls.log_level)
        try:
            shuffle_seed = int(seed) if seed not in (None, "") else None
        except ValueError:
            raise InvalidArgumentError(f"{_ENV_PREFIX}SHUFFLE_SEED must be an integer, got {seed!r}")
        return cls(shuffle_seed=shuffle_seed, log_level=level.upper())


_active: Optional[SeqOpsConfig] = None


def get_config() -> SeqOpsConfig:
    """get the active configuration, building it from the environment on first use"""
    global _active
    if _active is None:
        _active = SeqOpsConfig.from_env()
    return _active


def configure(**overrides) -> SeqOpsConfig:
    """replace the active configuration with a copy carrying the given overrides"""
    global _active
    known = {f.name for f in fields(SeqOpsConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise InvalidArgumentError(f"unknown config option(s): {', '.join(sorted(unknown))}")

    updated = replace(get_config(), **overrides)
    level = logging.getLevelName(updated.log_level.upper())
    if not isinstance(level, int):
        raise InvalidArgumentError(f"unknown log level: {updated.log_level!r}")

    logging.getLogger("seqops").setLevel(level)
    _active = updated
    logger.debug("configuration updated: %s", updated)
    return updated


def reset_config() -> None:
    """drop the active configuration so the next get_config() re-reads the environment"""
    global _active
    _active = None
