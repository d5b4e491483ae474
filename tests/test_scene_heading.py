"""Tests for parsers.scene_heading.parse_scene_heading."""

from core.models import LocationType
from parsers.scene_heading import HeadingComponents, parse_scene_heading


class TestSceneHeadingParser:
    """Tests for parse_scene_heading."""

    def test_int_day(self):
        result = parse_scene_heading("INT. KITCHEN - DAY")
        assert result == HeadingComponents(LocationType.INT, "KITCHEN", "DAY")

    def test_ext_night(self):
        result = parse_scene_heading("EXT. FOREST - NIGHT")
        assert result.location_type == LocationType.EXT
        assert result.location == "FOREST"
        assert result.time_of_day == "NIGHT"

    def test_int_ext_not_read_as_int(self):
        result = parse_scene_heading("INT./EXT. CAR - CONTINUOUS")
        assert result.location_type == LocationType.INT_EXT
        assert result.location == "CAR"
        assert result.time_of_day == "CONTINUOUS"

    def test_int_slash_ext_without_dot(self):
        result = parse_scene_heading("INT/EXT CAR - DAY")
        assert result.location_type == LocationType.INT_EXT
        assert result.location == "CAR"

    def test_i_e(self):
        result = parse_scene_heading("I/E TRUCK - DAY")
        assert result.location_type == LocationType.INT_EXT
        assert result.location == "TRUCK"

    def test_establishing(self):
        result = parse_scene_heading("EST. CITY SKYLINE - DAWN")
        assert result.location_type == LocationType.EST
        assert result.location == "CITY SKYLINE"
        assert result.time_of_day == "DAWN"

    def test_prefix_case_insensitive(self):
        result = parse_scene_heading("int. office - day")
        assert result.location_type == LocationType.INT
        assert result.location == "office"
        assert result.time_of_day == "day"

    def test_en_and_em_dash(self):
        assert parse_scene_heading("EXT. BEACH – DUSK").time_of_day == "DUSK"
        assert parse_scene_heading("EXT. BEACH—DUSK").location == "BEACH"

    def test_splits_on_first_separator(self):
        result = parse_scene_heading("EXT. ROAD - NIGHT - LATER")
        assert result.location == "ROAD"
        assert result.time_of_day == "NIGHT - LATER"

    def test_no_separator(self):
        result = parse_scene_heading("INT. ROOM")
        assert result.location == "ROOM"
        assert result.time_of_day == ""

    def test_empty_location(self):
        result = parse_scene_heading("INT. - DAY")
        assert result.location == ""
        assert result.time_of_day == "DAY"

    def test_forced_heading_without_prefix(self):
        result = parse_scene_heading("FLASHBACK")
        assert result.location_type == LocationType.UNKNOWN
        assert result.location == "FLASHBACK"
        assert result.time_of_day == ""

    def test_location_with_apostrophe(self):
        result = parse_scene_heading("EXT. KEVIN'S HOUSE - DAY")
        assert result.location == "KEVIN'S HOUSE"
        assert result.time_of_day == "DAY"

    def test_hyphen_inside_location_splits_early(self):
        # Any dash splits, including one inside a name.
        result = parse_scene_heading("INT. JEAN-PAUL'S HOUSE - DAY")
        assert result.location == "JEAN"
        assert result.time_of_day == "PAUL'S HOUSE - DAY"
