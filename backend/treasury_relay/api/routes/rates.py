import logging

from fastapi import APIRouter, Depends, Response

from treasury_relay.api.deps import feed_fetcher
from treasury_relay.schemas.rate import TreasuryBillRatesOut, TreasuryYieldCurveOut
from treasury_relay.services.treasury import FeedKind, TreasuryFeedError
from treasury_relay.services.treasury_rates import Fetcher, get_current_period_record

logger = logging.getLogger(__name__)

router = APIRouter(tags=["rates"])


def _current_record(kind: FeedKind, fetch: Fetcher):
    try:
        return dict(get_current_period_record(kind, fetch=fetch))
    except TreasuryFeedError as e:
        # clients get a bare 500; the cause stays in the server log
        logger.warning("%s lookup failed: %s: %s", kind.value, type(e).__name__, e)
        return None


@router.get(
    "/treasury_bill_rates",
    response_model=TreasuryBillRatesOut,
    responses={500: {"description": "Upstream feed unavailable"}},
)
def treasury_bill_rates(fetch: Fetcher = Depends(feed_fetcher)):
    rec = _current_record(FeedKind.BILL_RATES, fetch)
    if rec is None:
        return Response(status_code=500)
    return rec


@router.get(
    "/treasury_yield_curve",
    response_model=TreasuryYieldCurveOut,
    responses={500: {"description": "Upstream feed unavailable"}},
)
def treasury_yield_curve(fetch: Fetcher = Depends(feed_fetcher)):
    rec = _current_record(FeedKind.YIELD_CURVE, fetch)
    if rec is None:
        return Response(status_code=500)
    return rec
