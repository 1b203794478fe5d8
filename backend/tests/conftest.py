import pytest


BILL_FEED = b"""<?xml version="1.0" encoding="utf-8" standalone="yes"?>
<feed xml:base="https://home.treasury.gov/resource-center/data-chart-center/interest-rates/pages/xml"
      xmlns="http://www.w3.org/2005/Atom"
      xmlns:d="http://schemas.microsoft.com/ado/2007/08/dataservices"
      xmlns:m="http://schemas.microsoft.com/ado/2007/08/dataservices/metadata">
  <title type="text">DailyTreasuryBillRateData</title>
  <entry>
    <content type="application/xml">
      <m:properties>
        <d:INDEX_DATE m:type="Edm.DateTime">2024-05-01T00:00:00</d:INDEX_DATE>
        <d:ROUND_B1_YIELD_4WK_2 m:type="Edm.Double">5.49</d:ROUND_B1_YIELD_4WK_2>
        <d:ROUND_B1_YIELD_8WK_2 m:type="Edm.Double">5.50</d:ROUND_B1_YIELD_8WK_2>
        <d:ROUND_B1_YIELD_13WK_2 m:type="Edm.Double">5.45</d:ROUND_B1_YIELD_13WK_2>
        <d:ROUND_B1_YIELD_17WK_2 m:type="Edm.Double">5.43</d:ROUND_B1_YIELD_17WK_2>
        <d:ROUND_B1_YIELD_26WK_2 m:type="Edm.Double">5.38</d:ROUND_B1_YIELD_26WK_2>
        <d:ROUND_B1_YIELD_52WK_2 m:type="Edm.Double">5.18</d:ROUND_B1_YIELD_52WK_2>
      </m:properties>
    </content>
  </entry>
  <entry>
    <content type="application/xml">
      <m:properties>
        <d:INDEX_DATE m:type="Edm.DateTime">2024-05-02T00:00:00</d:INDEX_DATE>
        <d:ROUND_B1_YIELD_4WK_2 m:type="Edm.Double">5.48</d:ROUND_B1_YIELD_4WK_2>
        <d:ROUND_B1_YIELD_8WK_2 m:type="Edm.Double">5.49</d:ROUND_B1_YIELD_8WK_2>
        <d:ROUND_B1_YIELD_13WK_2 m:type="Edm.Double">5.44</d:ROUND_B1_YIELD_13WK_2>
        <d:ROUND_B1_YIELD_17WK_2 m:type="Edm.Double">5.42</d:ROUND_B1_YIELD_17WK_2>
        <d:ROUND_B1_YIELD_26WK_2 m:type="Edm.Double">5.36</d:ROUND_B1_YIELD_26WK_2>
        <d:ROUND_B1_YIELD_52WK_2 m:type="Edm.Double">5.15</d:ROUND_B1_YIELD_52WK_2>
      </m:properties>
    </content>
  </entry>
</feed>
"""

YIELD_FEED = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:d="http://schemas.microsoft.com/ado/2007/08/dataservices"
      xmlns:m="http://schemas.microsoft.com/ado/2007/08/dataservices/metadata">
  <entry>
    <content type="application/xml">
      <m:properties>
        <d:NEW_DATE m:type="Edm.DateTime">2024-05-01T00:00:00</d:NEW_DATE>
        <d:BC_1MONTH m:type="Edm.Double">5.49</d:BC_1MONTH>
        <d:BC_3MONTH m:type="Edm.Double">5.46</d:BC_3MONTH>
        <d:BC_10YEAR m:type="Edm.Double">4.63</d:BC_10YEAR>
        <d:BC_30YEAR m:type="Edm.Double">4.76</d:BC_30YEAR>
      </m:properties>
    </content>
  </entry>
</feed>
"""

EMPTY_FEED = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="text">DailyTreasuryBillRateData</title>
  <updated>2024-06-01T00:00:00Z</updated>
</feed>
"""


class RecordingFetcher:
    """Serves canned payloads keyed by the requested YYYYMM month."""

    def __init__(self, by_month=None, default=EMPTY_FEED, error=None):
        self.by_month = by_month or {}
        self.default = default
        self.error = error
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.by_month.get(url.params["field_tdr_date_value_month"], self.default)

    @property
    def months(self):
        return [u.params["field_tdr_date_value_month"] for u in self.urls]


@pytest.fixture()
def recording_fetcher():
    return RecordingFetcher


@pytest.fixture()
def bill_feed():
    return BILL_FEED


@pytest.fixture()
def yield_feed():
    return YIELD_FEED


@pytest.fixture()
def empty_feed():
    return EMPTY_FEED
