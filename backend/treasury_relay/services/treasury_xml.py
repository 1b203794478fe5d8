"""Streaming extraction of whitelisted fields from a Treasury rate feed.

The feed is an Atom document whose ``entry`` elements each carry one day of
rates under ``content/m:properties``. Only element local names matter here:
a field is picked up wherever it appears, and the last occurrence wins.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from types import MappingProxyType
from typing import Mapping
from xml.parsers.expat import errors as expat_errors

from treasury_relay.services.treasury import FeedSchema, NoEntriesError, XmlParseError


RateRecord = Mapping[str, str]

ENTRY_TAG = "entry"
CHUNK_SIZE = 64 * 1024

_NO_ELEMENTS = expat_errors.codes[expat_errors.XML_ERROR_NO_ELEMENTS]


def _strip(tag: str) -> str:
    # remove XML namespace: "{ns}TAG" -> "TAG"
    return tag.split("}", 1)[-1] if "}" in tag else tag


class _FeedScan:
    def __init__(self, schema: FeedSchema):
        self.schema = schema
        self.parser = ET.XMLPullParser(events=("start", "end"))
        self.seen_element = False
        self.found_entry = False
        self.values: dict[str, str] = {}

    def feed(self, chunk: bytes) -> None:
        # the pull parser queues syntax errors and raises them from read_events
        try:
            self.parser.feed(chunk)
            self._drain()
        except ET.ParseError as e:
            raise XmlParseError(f"treasury_xml_invalid: {e}") from e

    def close(self) -> None:
        try:
            self.parser.close()
        except ET.ParseError as e:
            if not self.seen_element and getattr(e, "code", None) == _NO_ELEMENTS:
                raise NoEntriesError() from e
            raise XmlParseError(f"treasury_xml_invalid: {e}") from e
        self._drain()

    def _drain(self) -> None:
        for event, elem in self.parser.read_events():
            name = _strip(elem.tag)
            if event == "start":
                self.seen_element = True
                if name == ENTRY_TAG:
                    self.found_entry = True
                continue

            if name in self.schema.whitelist:
                text = elem.text
                if text is not None and text.strip():
                    self.values[name] = text
            elif name == ENTRY_TAG:
                elem.clear()

    def record(self) -> RateRecord:
        if not self.found_entry:
            raise NoEntriesError()
        return MappingProxyType({f: self.values.get(f, "") for f in self.schema.fields})


def parse_feed_xml(xml_bytes: bytes, schema: FeedSchema) -> RateRecord:
    """Extract ``schema``'s fields from a feed document.

    Raises ``XmlParseError`` on malformed input and ``NoEntriesError`` when the
    document holds no ``entry`` element. Fields absent from the feed come back
    as empty strings, in the schema's declared order.
    """
    scan = _FeedScan(schema)
    view = memoryview(xml_bytes)
    for start in range(0, len(view), CHUNK_SIZE):
        scan.feed(bytes(view[start:start + CHUNK_SIZE]))
    scan.close()
    return scan.record()
