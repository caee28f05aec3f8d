# securepassgen/config.py
"""
Default generation settings for SecurePassGen.
Each key may be overridden with an environment variable SECUREPASSGEN_<KEY>
(e.g. SECUREPASSGEN_LENGTH=24). There is no configuration file.
"""

import logging
import os
from typing import Dict, Any, Optional, Mapping

logger = logging.getLogger(__name__)

ENV_PREFIX = "SECUREPASSGEN_"

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "min_uppercase": 1,
    "min_lowercase": 1,
    "min_numbers": 1,
    "min_symbols": 1,
    "copies": 1,
}

def env_key(key: str) -> str:
    return ENV_PREFIX + key.upper()

def load_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    env = os.environ if environ is None else environ
    out = DEFAULTS.copy()
    for key in DEFAULTS:
        raw = env.get(env_key(key))
        if raw is None or raw.strip() == "":
            continue
        try:
            value = int(raw, 10)
        except ValueError:
            logger.warning("Ignoring %s=%r: not an integer", env_key(key), raw)
            continue
        if value < 0:
            logger.warning("Ignoring %s=%r: must be >= 0", env_key(key), raw)
            continue
        out[key] = value
    return out
