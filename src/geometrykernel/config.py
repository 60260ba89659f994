"""
Configuration & Numeric Constants
=================================
This module serves as the central registry for the numeric constants shared by
the geometry kernel.

Why is this file needed?
------------------------
1. Consistency: the same precision threshold is used for equality tolerance,
   parallel detection and zero-length guards. Keeping it in one place stops
   the modules from drifting apart.
2. Deployment: the default clamp strategy of the segment distance query can be
   switched through the environment without touching calling code. The value
   is validated here, at import, so the distance functions themselves never
   fail on a bad setting.

Exports:
    PRECISION (float): Machine epsilon of the scalar type (float64).
    PARAMETRIC_LOW (float): Lower bound of a segment parameter.
    PARAMETRIC_HIGH (float): Upper bound of a segment parameter.
    DEFAULT_CLAMP_STRATEGY (ClampStrategy): The default clamp strategy.
"""
import logging
import os
from enum import StrEnum
from typing import Mapping

import numpy as np

from geometrykernel.errors import ConfigurationError

logger = logging.getLogger(__name__)

CLAMP_STRATEGY_ENV_VAR: str = "GEOMETRYKERNEL_CLAMP_STRATEGY"


class ClampStrategy(StrEnum):
    """How out-of-range segment parameters are brought back into [0, 1]."""
    SINGLE_PASS = "single_pass"
    EXACT = "exact"


def clamp_strategy_from_env(environ: Mapping[str, str] = os.environ) -> ClampStrategy:
    """
    Read the default clamp strategy from the environment.

    Raises:
        ConfigurationError: If the variable names an unknown strategy.
    """
    raw = environ.get(CLAMP_STRATEGY_ENV_VAR, ClampStrategy.SINGLE_PASS.value)
    name = raw.strip().lower()
    try:
        return ClampStrategy(name)
    except ValueError as e:
        valid = ", ".join(s.value for s in ClampStrategy)
        logger.error(f"{CLAMP_STRATEGY_ENV_VAR}='{raw}' is not one of: {valid}")
        raise ConfigurationError(f"{CLAMP_STRATEGY_ENV_VAR}='{raw}' is not a known clamp strategy") from e


# Global Constants
PRECISION: float = float(np.finfo(np.float64).eps)
PARAMETRIC_LOW: float = 0.0
PARAMETRIC_HIGH: float = 1.0

DEFAULT_CLAMP_STRATEGY: ClampStrategy = clamp_strategy_from_env()
