# tmath/config.py
import logging
import os
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

# Scalar types a Vector may be built over.
FLOAT_TYPES = (np.dtype(np.float32), np.dtype(np.float64))
SIGNED_TYPES = FLOAT_TYPES + (np.dtype(np.int32), np.dtype(np.int64))
SCALAR_TYPES = SIGNED_TYPES + (np.dtype(np.uint32), np.dtype(np.uint64))

DEFAULT_DTYPE = np.dtype(np.float64)

# Threshold used by Vector.near_zero()
NEAR_ZERO_EPSILON = 1e-8

SEED_ENV_VAR = "TMATH_SEED"

_rng: Optional[np.random.Generator] = None


def float_type_for(dtype) -> np.dtype:
    """
    Returns the float type of the same width, used before taking a square root.
    """
    dtype = np.dtype(dtype)
    if dtype in FLOAT_TYPES:
        return dtype
    return np.dtype(np.float32) if dtype.itemsize <= 4 else np.dtype(np.float64)


def seed(value: Optional[int] = None) -> np.random.Generator:
    """
    Reseeds the shared generator. None draws fresh OS entropy.
    """
    global _rng
    _rng = np.random.default_rng(value)
    logger.debug("Global generator seeded with %r", value)
    return _rng


def global_rng() -> np.random.Generator:
    """
    Shared generator used by the sampling helpers when no rng is injected.
    """
    if _rng is None:
        env_seed = os.environ.get(SEED_ENV_VAR)
        seed(int(env_seed) if env_seed else None)
    return _rng
