# ABOUTME: Unit tests for ScoredCandidate dataclass.
# ABOUTME: Validates construction and that any numeric score is accepted.

from bookfinder.metadata.candidate import ScoredCandidate
from bookfinder.metadata.types import RawCandidate


class TestScoredCandidate:
    """Tests for ScoredCandidate dataclass."""

    def test_construction(self) -> None:
        """A scored candidate wraps a RawCandidate with its score."""
        raw = RawCandidate(id="abc", title="Dune")
        scored = ScoredCandidate(candidate=raw, score=72.5)
        assert scored.candidate is raw
        assert scored.score == 72.5

    def test_zero_score_is_valid(self) -> None:
        """A score of exactly 0 is allowed (the fallback score)."""
        scored = ScoredCandidate(candidate=RawCandidate(id="abc", title="Dune"), score=0)
        assert scored.score == 0

    def test_negative_score_is_accepted(self) -> None:
        """A negative score, e.g. from a malformed rating, is kept as-is."""
        scored = ScoredCandidate(candidate=RawCandidate(id="abc", title="Dune"), score=-240)
        assert scored.score == -240
