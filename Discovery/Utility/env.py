"""Environment helpers (.env loading)"""
import os
import logging
from typing import Dict

logger = logging.getLogger(__name__)


def _strip_quotes(val: str) -> str:
    if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
        return val[1:-1]
    return val


def load_env_file(filepath: str = ".env") -> Dict[str, str]:
    """Load KEY=VALUE pairs into os.environ without overriding existing values.
    Returns the variables that were actually set.
    """
    loaded: Dict[str, str] = {}
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return loaded
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):]
                key, sep, val = line.partition("=")
                key = key.strip()
                if not sep or not key:
                    continue
                if key in os.environ:
                    continue
                os.environ[key] = loaded[key] = _strip_quotes(val.strip())
    except OSError as e:
        logger.warning("Could not read .env file %s: %s", filepath, e)
    logger.debug("Loaded %d variables from %s", len(loaded), filepath)
    return loaded
