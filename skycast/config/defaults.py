"""Popular cities offered as search suggestions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SuggestedCity:
    name: str
    country: str


POPULAR_CITIES: list[SuggestedCity] = [
    SuggestedCity(name="London", country="UK"),
    SuggestedCity(name="New York", country="US"),
    SuggestedCity(name="Tokyo", country="JP"),
    SuggestedCity(name="Paris", country="FR"),
    SuggestedCity(name="Sydney", country="AU"),
    SuggestedCity(name="Berlin", country="DE"),
    SuggestedCity(name="Moscow", country="RU"),
    SuggestedCity(name="Dubai", country="AE"),
    SuggestedCity(name="Singapore", country="SG"),
    SuggestedCity(name="Toronto", country="CA"),
]

MIN_SUGGESTION_CHARS = 2
MAX_SUGGESTIONS = 5


def suggest_cities(
    text: str,
    cities: list[SuggestedCity] = POPULAR_CITIES,
    limit: int = MAX_SUGGESTIONS,
) -> list[SuggestedCity]:
    """Case-insensitive substring match against the popular city list."""
    needle = text.strip().lower()
    if len(needle) < MIN_SUGGESTION_CHARS:
        return []
    return [c for c in cities if needle in c.name.lower()][:limit]
