from __future__ import annotations

import logging
from datetime import date, datetime
from functools import partial
from typing import Callable

import httpx

from treasury_relay.core.config import settings
from treasury_relay.services.treasury import (
    FeedKind,
    NoEntriesError,
    build_url,
    fetch_feed_bytes,
    month_param,
    schema_for,
)
from treasury_relay.services.treasury_xml import RateRecord, parse_feed_xml
from treasury_relay.utils.timezone import month_start, now_utc


logger = logging.getLogger(__name__)

Fetcher = Callable[[httpx.URL], bytes]


def previous_month(d: date) -> date:
    if d.month > 1:
        return date(d.year, d.month - 1, 1)
    if d.year <= date.min.year:
        raise NoEntriesError("treasury_no_entries: no month before year 1")
    return date(d.year - 1, 12, 1)


def default_fetcher(client: httpx.Client | None = None) -> Fetcher:
    return partial(
        fetch_feed_bytes,
        timeout_s=float(settings.treasury_timeout_seconds),
        client=client,
    )


def get_rates_for_month(
    kind: FeedKind,
    month: date,
    *,
    fetch: Fetcher | None = None,
    base_url: str | None = None,
) -> RateRecord:
    fetch = fetch or default_fetcher()
    url = build_url(kind, month, base_url or settings.treasury_base_url)

    logger.info("fetching %s for %s", FeedKind(kind).value, month_param(month))
    payload = fetch(url)
    return parse_feed_xml(payload, schema_for(kind))


def get_current_period_record(
    kind: FeedKind,
    now: datetime | date | None = None,
    *,
    fetch: Fetcher | None = None,
    base_url: str | None = None,
) -> RateRecord:
    """Rates for the month of ``now``, or the month before when it is empty.

    Only ``NoEntriesError`` triggers the fallback, and only once; every other
    failure propagates from the first attempt.
    """
    current = month_start(now or now_utc())

    try:
        return get_rates_for_month(kind, current, fetch=fetch, base_url=base_url)
    except NoEntriesError:
        prior = previous_month(current)
        logger.info(
            "no %s entries for %s, falling back to %s",
            FeedKind(kind).value,
            month_param(current),
            month_param(prior),
        )

    return get_rates_for_month(kind, prior, fetch=fetch, base_url=base_url)
