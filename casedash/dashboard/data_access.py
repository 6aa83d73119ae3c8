from __future__ import annotations

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from casedash.core.config import API_URL, FETCH_TIMEOUT
from casedash.core.records import Record, parse_records

logger = logging.getLogger(__name__)


class DataFetchError(RuntimeError):
    """The endpoint answered, but not with a usable `records` payload."""


def fetch_records(
    url: str = API_URL,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = FETCH_TIMEOUT,
) -> tuple[Record, ...]:
    """
    GET the full case distribution feed and return its records in source order.

    Nothing is cached and nothing is retried: network errors, HTTP error
    statuses and non-JSON bodies propagate to the caller as raised by requests.
    """
    http = session or requests
    try:
        resp = http.get(url, timeout=timeout)
        resp.raise_for_status()
        payload = resp.json()
    except requests.exceptions.RequestException:
        logger.exception("Fetching records from %s failed", url)
        raise

    rows = payload.get("records") if isinstance(payload, dict) else None
    if not isinstance(rows, list):
        raise DataFetchError(f"Response from {url} has no 'records' list")

    try:
        records = parse_records(rows)
    except ValidationError as e:
        raise DataFetchError(f"Malformed record in response from {url}: {e}") from e

    logger.info("Fetched %d records from %s", len(records), url)
    return records
