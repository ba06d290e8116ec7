"""Tests for location scoring."""

import pytest

from talent_matcher.core.location import LocationScorer


@pytest.fixture
def scorer() -> LocationScorer:
    return LocationScorer()


class TestLocationScorer:
    """Test geographic compatibility scoring."""

    def test_identical_text(self, scorer):
        """Verify identical locations ignore case and whitespace."""
        assert scorer.score("Berlin", "  berlin ").score == 100

    def test_neighbouring_postal_codes(self, scorer):
        """Verify codes sharing the first two digits score 80."""
        assert scorer.score("10115 Berlin", "10117 Berlin").score == 80

    def test_identical_postal_codes(self, scorer):
        assert scorer.score("10115 Berlin", "10115").score == 100

    def test_equal_part(self, scorer):
        """Verify one shared part scores 95 and is reported."""
        result = scorer.score("Berlin", "Berlin, Germany")
        assert result.score == 95
        assert result.matched_locations == ["berlin"]

    def test_containment(self, scorer):
        assert scorer.score("München", "München Innenstadt").score == 90

    def test_short_parts_are_not_contained(self, scorer):
        """Verify parts of three characters or less do not count as contained."""
        assert scorer.score("Ulm", "Ulmen").score != 90

    def test_same_region(self, scorer):
        """Verify cities of one region score 70."""
        assert scorer.score("Potsdam", "Berlin").score == 70

    def test_city_inside_longer_city_name(self, scorer):
        """Verify Frankfurt (Oder) is not placed in the region of Frankfurt am Main."""
        assert scorer.score("Frankfurt (Oder)", "Potsdam").score == 70
        assert scorer.score("Frankfurt (Oder)", "Wiesbaden").score == 30
        assert scorer.score("Frankfurt am Main", "Wiesbaden").score == 70

    def test_short_parts_are_not_evidence(self, scorer):
        """Verify parts too short to be contained are not reported as matched."""
        result = scorer.score("Berlin, DE", "Hamburg, Deutschland")
        assert result.score == 30
        assert result.matched_locations == []

    def test_unrelated_locations(self, scorer):
        assert scorer.score("Hamburg", "München").score == 30

    def test_hybrid_keyword(self, scorer):
        """Verify hybrid positions raise the fallback score."""
        assert scorer.score("Hamburg", "München (hybrid)").score == 50

    def test_empty_locations(self, scorer):
        """Verify missing locations fall back to the default."""
        assert scorer.score(None, "").score == 30
        assert scorer.score("", "Berlin").score == 30

    def test_list_of_locations(self, scorer):
        """Verify several candidate locations are all considered."""
        assert scorer.score(["Hamburg", "Berlin"], "Berlin").score == 95


class TestRemoteWork:
    """Test remote work handling."""

    def test_remote_candidate_and_remote_position(self, scorer):
        """Verify homeoffice candidates fit remote positions."""
        result = scorer.score("homeoffice", "Berlin", remote_allowed=True)
        assert result.score >= 80

    def test_both_sides_remote(self, scorer):
        assert scorer.score("Remote", "Remote (Deutschland)", remote_allowed=True).score == 100

    def test_remote_keyword_needs_remote_position(self, scorer):
        """Verify remote wishes do not help on-site positions."""
        assert scorer.score("Remote", "Berlin", remote_allowed=False).score == 30

    def test_remote_is_whole_word(self, scorer):
        """Verify 'remote' inside another word is no remote keyword."""
        assert scorer.score("Remoteville", "Berlin", remote_allowed=True).score == 30

    def test_custom_scores(self):
        """Verify score overrides apply."""
        scorer = LocationScorer(scores={"default": 0})
        assert scorer.score("Hamburg", "München").score == 0
