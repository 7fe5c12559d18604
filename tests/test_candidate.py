"""Candidate parsing from nearby_deals rows."""

from datetime import timezone

from deal_ranking import Candidate, parse_candidate

from .conftest import make_row


class TestParseCandidate:
    def test_nested_template_is_flattened(self):
        c = parse_candidate(make_row("d1", "Half off", "cuisine-id-mexican", "R1", 2.5))
        assert c.deal_id == "d1"
        assert c.title == "Half off"
        assert c.cuisine_id == "cuisine-id-mexican"
        assert c.restaurant_id == "R1"
        assert c.distance_miles == 2.5
        assert c.created_at.tzinfo is not None

    def test_flat_row_accepted(self):
        c = parse_candidate({"deal_id": "d1", "title": "Flat", "restaurant_id": "R9"})
        assert c.title == "Flat"
        assert c.restaurant_id == "R9"
        assert c.distance_miles is None
        assert c.created_at is None

    def test_candidate_passes_through(self):
        c = Candidate(deal_id="d1", title="t")
        assert parse_candidate(c) is c

    def test_malformed_rows_return_none(self):
        assert parse_candidate(None) is None
        assert parse_candidate("d1") is None
        assert parse_candidate({"title": "no id"}) is None
        assert parse_candidate({"deal_id": "", "title": "blank id"}) is None
        assert parse_candidate({"deal_id": "d1", "deal_template": None}) is None
        assert parse_candidate({"deal_id": "d1", "deal_template": {"cuisine_id": "x"}}) is None

    def test_bad_distance_is_absent(self):
        for bad in (-1.0, float("nan"), "far", True):
            row = make_row("d1")
            row["distance_miles"] = bad
            assert parse_candidate(row).distance_miles is None

    def test_bad_created_at_is_absent(self):
        row = make_row("d1")
        row["created_at"] = "not-a-date"
        assert parse_candidate(row).created_at is None

    def test_zulu_and_naive_timestamps_are_utc(self):
        row = make_row("d1")
        row["created_at"] = "2026-01-10T12:00:00Z"
        assert parse_candidate(row).created_at.tzinfo == timezone.utc
        row["created_at"] = "2026-01-10T12:00:00"
        assert parse_candidate(row).created_at.tzinfo == timezone.utc

    def test_extra_fields_kept(self):
        row = make_row("d1")
        row["view_count"] = 12
        row["is_anonymous"] = False
        c = parse_candidate(row)
        assert c.view_count == 12
        assert c.is_anonymous is False
