"""Tests for the venue-finder command line."""

from __future__ import annotations

import json

from click.testing import CliRunner

from venue_finder.cli import cli


def _invoke(*args):
    return CliRunner().invoke(cli, list(args))


class TestDistanceCommand:
    def test_prints_km(self):
        result = _invoke("distance", "40.7580", "-73.9855", "40.7128", "-74.0060")
        assert result.exit_code == 0
        value = float(result.output.split()[0])
        assert abs(value - 5.31) < 0.05
        assert result.output.strip().endswith("km")

    def test_southern_western_hemisphere(self):
        # Santiago to Buenos Aires ≈ 1140 km
        result = _invoke("distance", "-33.4489", "-70.6693", "-34.6037", "-58.3816")
        assert result.exit_code == 0
        assert 1100 < float(result.output.split()[0]) < 1180

    def test_infinite_coordinate_is_usage_error(self):
        result = _invoke("distance", "inf", "0", "0", "0")
        assert result.exit_code == 2
        assert "lat1 is infinite" in result.output

    def test_same_point(self):
        result = _invoke("distance", "10", "20", "10", "20")
        assert result.output.strip() == "0.00 km"


class TestNearbyCommand:
    def test_sample_venues(self):
        result = _invoke("nearby", "--max-km", "2")
        assert result.exit_code == 0
        assert "Nearby venues within 2 km" in result.output
        assert "Restaurant B" in result.output
        assert "Gym E" in result.output
        assert "Park C" not in result.output
        assert "Coffee Shop A" not in result.output

    def test_infinite_location_is_usage_error(self):
        result = _invoke("nearby", "--lat", "inf")
        assert result.exit_code == 2
        assert "lat is infinite" in result.output

    def test_negative_location_option(self):
        result = _invoke("nearby", "--lat", "40.7580", "--lon", "-73.9855", "--max-km", "0.5")
        assert result.exit_code == 0
        assert "Restaurant B" in result.output

    def test_nan_location_is_usage_error(self):
        result = _invoke("nearby", "--lat", "nan")
        assert result.exit_code == 2
        assert "Invalid input" in result.output


class TestSearchCommand:
    def test_restaurants_by_name(self):
        result = _invoke("search", "--max-km", "2", "--type", "Restaurant", "--sort", "name")
        assert result.exit_code == 0
        assert "Pizza Palace" in result.output
        assert "Bar & Grill" not in result.output
        assert result.output.index("Pizza Palace") < result.output.index("Restaurant B")

    def test_no_matches(self):
        result = _invoke("search", "--max-km", "2", "--type", "library")
        assert result.exit_code == 0
        assert "No matching venues" in result.output

    def test_bad_sort_choice(self):
        result = _invoke("search", "--sort", "rating")
        assert result.exit_code == 2

    def test_venues_file(self, tmp_path):
        path = tmp_path / "venues.json"
        path.write_text(json.dumps([
            {"name": "Corner Deli", "latitude": 40.7581, "longitude": -73.9856, "type": "deli"},
            {"name": "Far Away Diner", "latitude": 41.0, "longitude": -74.5, "type": "deli"},
        ]))
        result = _invoke("search", "--venues", str(path), "--type", "deli")
        assert result.exit_code == 0
        assert "Corner Deli" in result.output
        assert "Far Away Diner" not in result.output

    def test_invalid_venues_file(self, tmp_path):
        path = tmp_path / "venues.json"
        path.write_text(json.dumps([{"name": "No Coords"}]))
        result = _invoke("nearby", "--venues", str(path))
        assert result.exit_code == 1
        assert "latitude is missing" in result.output
