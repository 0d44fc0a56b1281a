#!/usr/bin/env python3
"""
Data model for aviation weather responses.

Every value here is request-scoped and immutable. Upstream JSON is loosely
shaped, so it is parsed once at the boundary into explicit variants:

- a runway entry is a ``RunwayText``, a ``RunwayRecord`` or an
  ``UnknownRunway``
- a G-AIRMET payload is a ``GAirmetText``, a ``GAirmetList`` or a
  ``GAirmetOther``

Each variant knows how to render itself, so formatting code never has to
look at raw JSON types.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

NOT_SPECIFIED = "Not specified"


def _first(data, *keys):
    """Return the first non-None value among ``keys`` in ``data``."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _parse_dimension(dimension):
    """Split an upstream ``"12079x200"`` dimension into (length, width)."""
    if not isinstance(dimension, str) or "x" not in dimension.lower():
        return None, None
    length, width = dimension.lower().split("x", 1)
    return length.strip() or None, width.strip() or None


@dataclass(frozen=True)
class RunwayText:
    """A runway the upstream API only gave us as a string."""

    text: str

    def describe(self):
        return self.text.strip()


@dataclass(frozen=True)
class RunwayRecord:
    """A structured runway entry."""

    id: Optional[str] = None
    length: Any = None
    width: Any = None
    surface: Optional[str] = None

    @classmethod
    def from_json(cls, data):
        length = _first(data, "length", "len")
        width = _first(data, "width")
        if length is None and width is None:
            length, width = _parse_dimension(data.get("dimension"))
        return cls(
            id=_first(data, "id", "ident", "name"),
            length=length,
            width=width,
            surface=_first(data, "surface", "surf"),
        )

    def describe(self):
        dimensions = [f"{value} ft" for value in (self.length, self.width) if value is not None]
        parts = []
        if self.id is not None:
            parts.append(str(self.id))
        if dimensions:
            parts.append(f"({' x '.join(dimensions)})")
        if self.surface is not None:
            parts.append(str(self.surface))
        return " ".join(parts).strip()


@dataclass(frozen=True)
class UnknownRunway:
    """Anything in a runway list we cannot interpret."""

    raw: Any = None

    def describe(self):
        return "Unknown runway format"


RunwayEntry = Union[RunwayText, RunwayRecord, UnknownRunway]


def parse_runway(raw) -> RunwayEntry:
    """Classify one upstream runway element; parsed entries pass through."""
    if isinstance(raw, (RunwayText, RunwayRecord, UnknownRunway)):
        return raw
    if isinstance(raw, str):
        return RunwayText(raw)
    if isinstance(raw, dict):
        return RunwayRecord.from_json(raw)
    return UnknownRunway(raw)


@dataclass(frozen=True)
class AirportRecord:
    """Airport metadata as returned by the airport endpoint."""

    identifier: Optional[str] = None
    name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    elevation: Any = None
    runways: Tuple[RunwayEntry, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data):
        runways = data.get("runways")
        if not isinstance(runways, list):
            runways = []
        return cls(
            identifier=_first(data, "icaoId", "icao", "id"),
            name=data.get("name"),
            city=data.get("city"),
            state=data.get("state"),
            country=data.get("country"),
            latitude=_first(data, "lat", "latitude"),
            longitude=_first(data, "lon", "longitude"),
            elevation=_first(data, "elev", "elevation"),
            runways=tuple(parse_runway(r) for r in runways),
        )

    @property
    def has_coordinates(self):
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class GAirmetRecord:
    """One decoded G-AIRMET advisory."""

    type: Optional[str] = None
    hazard: Optional[str] = None
    valid: Optional[str] = None
    area: Optional[str] = None

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict):
            return cls()
        return cls(
            type=_first(data, "product", "type"),
            hazard=data.get("hazard"),
            valid=_first(data, "validTime", "valid"),
            area=data.get("area"),
        )

    def describe(self, number):
        return "\n".join(
            [
                f"G-AIRMET #{number}:",
                f"Type: {self.type or NOT_SPECIFIED}",
                f"Hazard: {self.hazard or NOT_SPECIFIED}",
                f"Valid: {self.valid or NOT_SPECIFIED}",
                f"Area: {self.area or NOT_SPECIFIED}",
            ]
        )


@dataclass(frozen=True)
class GAirmetText:
    text: str

    def render(self):
        return self.text.strip()


@dataclass(frozen=True)
class GAirmetList:
    records: Tuple[GAirmetRecord, ...]

    def render(self):
        return "\n\n".join(
            record.describe(number) for number, record in enumerate(self.records, start=1)
        )


@dataclass(frozen=True)
class GAirmetOther:
    data: Any

    def render(self):
        return json.dumps(self.data, indent=2)


GAirmetPayload = Union[GAirmetText, GAirmetList, GAirmetOther]


def parse_gairmet_payload(data) -> GAirmetPayload:
    """Classify a decoded G-AIRMET response."""
    if isinstance(data, str):
        return GAirmetText(data)
    if isinstance(data, list):
        return GAirmetList(tuple(GAirmetRecord.from_json(item) for item in data))
    return GAirmetOther(data)


@dataclass(frozen=True)
class RouteBriefing:
    """Weather along a direct route between two airports."""

    departure: str
    destination: str
    distance_nm: float
    midpoint: Tuple[float, float]
    departure_metar: str
    departure_taf: str
    destination_metar: str
    destination_taf: str
    search_radius: int
    enroute_pireps: str
