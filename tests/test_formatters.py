"""Tests for text formatting of aviation weather records."""

import json

from utils.formatters import (
    format_airport_info,
    format_gairmets,
    format_route_briefing,
    format_runways,
    or_not_available,
    text_or,
)
from utils.models import (
    AirportRecord,
    GAirmetList,
    GAirmetOther,
    GAirmetText,
    RouteBriefing,
    RunwayRecord,
    RunwayText,
    UnknownRunway,
    parse_gairmet_payload,
    parse_runway,
)


class TestRunwayParsing:
    """Test classification of upstream runway elements."""

    def test_variants(self):
        assert parse_runway("04L/22R") == RunwayText("04L/22R")
        assert isinstance(parse_runway({"id": "13/31"}), RunwayRecord)
        assert isinstance(parse_runway(42), UnknownRunway)
        assert isinstance(parse_runway(None), UnknownRunway)

    def test_parsed_entries_pass_through(self):
        record = RunwayRecord(id="09")
        assert parse_runway(record) is record

    def test_dimension_string(self):
        record = RunwayRecord.from_json({"id": "04L/22R", "dimension": "12079x200", "surface": "A"})
        assert record.length == "12079"
        assert record.width == "200"


class TestFormatRunways:
    """Test the runway list formatter."""

    def test_full_record(self):
        runways = [{"id": "04L/22R", "length": 12079, "width": 200, "surface": "ASPH"}]
        assert format_runways(runways) == "04L/22R (12079 ft x 200 ft) ASPH"

    def test_missing_components_leave_no_separators(self):
        assert format_runways([{"id": "13/31", "surface": "CONC"}]) == "13/31 CONC"
        assert format_runways([{"id": "13/31", "length": 8000}]) == "13/31 (8000 ft)"
        assert format_runways([{"length": 8000, "width": 150}]) == "(8000 ft x 150 ft)"

    def test_empty_or_absent(self):
        assert format_runways([]) == "None listed"
        assert format_runways(None) == "None listed"

    def test_unknown_elements_degrade_per_entry(self):
        text = format_runways(["09/27", 17, {"id": "18"}])
        assert text.splitlines() == ["09/27", "Unknown runway format", "18"]

    def test_plain_strings_are_idempotent(self):
        runways = ["  04/22 ", "13/31"]
        once = format_runways(runways)
        assert once == "04/22\n13/31"
        assert format_runways(once.splitlines()) == once


class TestAirportInfo:
    """Test the airport information block."""

    def test_from_upstream_json(self):
        airport = AirportRecord.from_json(
            {
                "icaoId": "KBOS",
                "name": "BOSTON/GENERAL EDWARD LAWRENCE LOGAN INTL",
                "state": "MA",
                "country": "US",
                "lat": 42.3629,
                "lon": -71.0064,
                "elev": 19,
                "runways": [{"id": "04R/22L", "dimension": "10005x150", "surface": "A"}],
            }
        )

        text = format_airport_info("KBOS", airport)

        assert text.startswith("Airport Information for KBOS:")
        assert "Name: BOSTON/GENERAL EDWARD LAWRENCE LOGAN INTL" in text
        assert "City: Not available" in text
        assert "State: MA" in text
        assert "Latitude: 42.3629" in text
        assert "Elevation: 19 ft" in text
        assert text.endswith("Runways:\n04R/22L (10005 ft x 150 ft) A")

    def test_every_missing_field_is_marked(self):
        text = format_airport_info("KXYZ", AirportRecord())
        for label in ("Name", "City", "State", "Country", "Latitude", "Longitude", "Elevation"):
            assert f"{label}: Not available" in text
        assert "Runways:\nNone listed" in text

    def test_zero_is_a_value(self):
        assert or_not_available(0) == "0"
        assert or_not_available(0, " ft") == "0 ft"
        assert or_not_available("  ") == "Not available"


class TestGAirmets:
    """Test G-AIRMET payload rendering."""

    def test_numbered_blocks(self):
        payload = parse_gairmet_payload(
            [
                {"product": "SIERRA", "hazard": "IFR", "validTime": "2024-01-01T12:00:00Z", "area": "NE US"},
                {"hazard": "TURB-HI"},
            ]
        )

        text = format_gairmets(payload)

        assert isinstance(payload, GAirmetList)
        assert "G-AIRMET #1:\nType: SIERRA\nHazard: IFR\nValid: 2024-01-01T12:00:00Z\nArea: NE US" in text
        assert "G-AIRMET #2:\nType: Not specified\nHazard: TURB-HI\nValid: Not specified\nArea: Not specified" in text

    def test_text_is_trimmed(self):
        payload = parse_gairmet_payload("  G-AIRMET SIERRA UPDT 2  \n")
        assert payload == GAirmetText("  G-AIRMET SIERRA UPDT 2  \n")
        assert format_gairmets(payload) == "G-AIRMET SIERRA UPDT 2"

    def test_other_structures_are_pretty_printed(self):
        data = {"features": [{"id": 1}]}
        payload = parse_gairmet_payload(data)
        assert isinstance(payload, GAirmetOther)
        assert format_gairmets(payload) == json.dumps(data, indent=2)


class TestRouteBriefing:
    """Test the route briefing block."""

    def _briefing(self, **overrides):
        values = dict(
            departure="KBOS",
            destination="KPHL",
            distance_nm=242.6,
            midpoint=(41.1, -73.1),
            departure_metar="KBOS METAR",
            departure_taf="KBOS TAF",
            destination_metar="KPHL METAR",
            destination_taf="KPHL TAF",
            search_radius=81,
            enroute_pireps="UA /OV KJFK",
        )
        values.update(overrides)
        return RouteBriefing(**values)

    def test_sections_in_order(self):
        text = format_route_briefing(self._briefing())

        assert "Route Weather Briefing: KBOS to KPHL" in text
        assert "Approximate distance: 243 nm" in text
        assert "Midpoint: 41.1000, -73.1000" in text
        assert "within 81 miles of midpoint" in text
        positions = [text.index(s) for s in ("KBOS METAR", "KBOS TAF", "KPHL METAR", "KPHL TAF", "UA /OV KJFK")]
        assert positions == sorted(positions)

    def test_empty_sections_fall_back(self):
        text = format_route_briefing(
            self._briefing(departure_taf="  ", destination_metar="", enroute_pireps="\n")
        )
        assert "TAF: Not available" in text
        assert "METAR: Not available" in text
        assert text.endswith("No PIREPs found en-route")

    def test_text_or(self):
        assert text_or("  abc \n", "x") == "abc"
        assert text_or(None, "x") == "x"
