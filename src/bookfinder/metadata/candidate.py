# ABOUTME: ScoredCandidate pairs a raw provider candidate with its relevance score.
# ABOUTME: Exists only while a title search ranks its results; never returned to callers.

from dataclasses import dataclass

from bookfinder.metadata.types import RawCandidate


@dataclass
class ScoredCandidate:
    """A provider candidate and the relevance score it earned for a query."""

    candidate: RawCandidate
    score: float
