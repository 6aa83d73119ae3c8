from __future__ import annotations

import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(value: str | None) -> float | None:
    """Turn '30' into 30.0; keep empty/unset as None (no timeout)."""
    value = (value or "").strip()
    if not value:
        return None
    return float(value)


# Remote source
API_URL = os.getenv(
    "CASEDASH_API_URL",
    "https://opendata.ecdc.europa.eu/covid19/casedistribution/json/",
)
FETCH_TIMEOUT = _optional_float(os.getenv("CASEDASH_FETCH_TIMEOUT"))


# Logging
LOG_LEVEL = os.getenv("CASEDASH_LOG_LEVEL", "INFO").upper()
