# ABOUTME: Relevance scoring for Google Books candidates against a title query.
# ABOUTME: Each candidate is scored on its own; title match, popularity, and completeness add points.

from bookfinder.metadata.types import RawCandidate

_BASE_SCORE = 10.0

# Ratings count is divided down so popularity never outweighs a title match.
_RATINGS_COUNT_DIVISOR = 100.0
_AVERAGE_RATING_WEIGHT = 5.0

# Title bonuses are mutually exclusive; exact wins.
_EXACT_TITLE_BONUS = 50.0
_PARTIAL_TITLE_BONUS = 20.0

# Completeness bonuses, one per populated field.
_DESCRIPTION_BONUS = 5.0
_THUMBNAIL_BONUS = 5.0
_IDENTIFIER_BONUS = 5.0


def _fold(text: str) -> str:
    return text.casefold()


def is_exact_title_match(candidate: RawCandidate, query: str) -> bool:
    """Whether the trimmed, case-folded title equals the trimmed, case-folded query."""
    if not candidate.title:
        return False
    return _fold(candidate.title.strip()) == _fold(query.strip())


def is_partial_title_match(candidate: RawCandidate, query: str) -> bool:
    """Whether the case-folded title contains the case-folded query."""
    if not candidate.title:
        return False
    return _fold(query) in _fold(candidate.title)


def score_candidate(candidate: RawCandidate, query: str) -> float:
    """Score how relevant a candidate is for a title query.

    Depends only on the candidate and the query, so scores are stable no
    matter how the provider ordered its results.
    """
    score = _BASE_SCORE

    score += (candidate.ratings_count or 0) / _RATINGS_COUNT_DIVISOR
    score += (candidate.average_rating or 0) * _AVERAGE_RATING_WEIGHT

    if is_exact_title_match(candidate, query):
        score += _EXACT_TITLE_BONUS
    elif is_partial_title_match(candidate, query):
        score += _PARTIAL_TITLE_BONUS

    if candidate.description:
        score += _DESCRIPTION_BONUS
    if candidate.thumbnail:
        score += _THUMBNAIL_BONUS
    if candidate.identifiers:
        score += _IDENTIFIER_BONUS

    return score
