from fastapi import Depends
import httpx

from treasury_relay.core.config import settings
from treasury_relay.services.treasury_rates import Fetcher, default_fetcher

def http_client():
    c = httpx.Client(
        timeout=float(settings.treasury_timeout_seconds),
        follow_redirects=True,
    )
    try:
        yield c
    finally:
        c.close()

def feed_fetcher(c: httpx.Client = Depends(http_client)) -> Fetcher:
    return default_fetcher(c)
