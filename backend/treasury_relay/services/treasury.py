from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import date

import httpx


logger = logging.getLogger(__name__)

# From https://home.treasury.gov/resource-center/data-chart-center/interest-rates/TextView
TREASURY_XML_BASE = (
    "https://home.treasury.gov/resource-center/data-chart-center/"
    "interest-rates/pages/xml"
)

DEFAULT_TIMEOUT_S = 20.0


class TreasuryFeedError(RuntimeError):
    code = "treasury_feed_error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)


class UrlBuildError(TreasuryFeedError):
    code = "treasury_url_invalid"


class NetworkError(TreasuryFeedError):
    code = "treasury_fetch_failed"


class XmlParseError(TreasuryFeedError):
    code = "treasury_xml_invalid"


class NoEntriesError(TreasuryFeedError):
    code = "treasury_no_entries"


class FeedKind(str, enum.Enum):
    BILL_RATES = "daily_treasury_bill_rates"
    YIELD_CURVE = "daily_treasury_yield_curve"


@dataclass(frozen=True)
class FeedSchema:
    kind: FeedKind
    fields: tuple[str, ...]
    whitelist: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "whitelist", frozenset(self.fields))


BILL_RATES_SCHEMA = FeedSchema(
    kind=FeedKind.BILL_RATES,
    fields=(
        "ROUND_B1_YIELD_4WK_2",
        "ROUND_B1_YIELD_8WK_2",
        "ROUND_B1_YIELD_13WK_2",
        "ROUND_B1_YIELD_17WK_2",
        "ROUND_B1_YIELD_26WK_2",
        "ROUND_B1_YIELD_52WK_2",
        "INDEX_DATE",
    ),
)

YIELD_CURVE_SCHEMA = FeedSchema(
    kind=FeedKind.YIELD_CURVE,
    fields=(
        "BC_1MONTH",
        "BC_2MONTH",
        "BC_3MONTH",
        "BC_4MONTH",
        "BC_6MONTH",
        "BC_1YEAR",
        "BC_2YEAR",
        "BC_3YEAR",
        "BC_5YEAR",
        "BC_7YEAR",
        "BC_10YEAR",
        "BC_20YEAR",
        "BC_30YEAR",
        "NEW_DATE",
    ),
)

_SCHEMAS: dict[FeedKind, FeedSchema] = {
    FeedKind.BILL_RATES: BILL_RATES_SCHEMA,
    FeedKind.YIELD_CURVE: YIELD_CURVE_SCHEMA,
}


def schema_for(kind: FeedKind) -> FeedSchema:
    return _SCHEMAS[FeedKind(kind)]


def month_param(month: date) -> str:
    return f"{month.year:04d}{month.month:02d}"


def build_url(kind: FeedKind, month: date, base_url: str = TREASURY_XML_BASE) -> httpx.URL:
    params = {
        "data": FeedKind(kind).value,
        "field_tdr_date_value_month": month_param(month),
    }
    try:
        url = httpx.URL(base_url, params=params)
    except (httpx.InvalidURL, TypeError) as e:
        raise UrlBuildError(f"treasury_url_invalid: {base_url!r}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise UrlBuildError(f"treasury_url_invalid: {base_url!r}")
    return url


def fetch_feed_bytes(
    url: httpx.URL | str,
    *,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    client: httpx.Client | None = None,
) -> bytes:
    try:
        if client is not None:
            r = client.get(url, timeout=timeout_s, follow_redirects=True)
        else:
            with httpx.Client(timeout=timeout_s, follow_redirects=True) as c:
                r = c.get(url)
        r.raise_for_status()
    except httpx.HTTPError as e:
        raise NetworkError(f"treasury_fetch_failed: {type(e).__name__}") from e

    logger.debug("fetched %d bytes from %s", len(r.content), url)
    return r.content
