"""Filter chain for advocate search.

Filter order:
  1. SearchTermFilter: free text over names, city, degree, specialties, years
  2. CityFilter: substring of city
  3. DegreeFilter: substring of degree
  4. SpecialtiesFilter: every requested specialty must be satisfied
  5. ExperienceLevelFilter: years of experience inside the bucket

Every filter is a no-op when its value is empty. String matching is
case-insensitive substring containment using ``str.casefold`` on both sides.
Filters keep the relative order of their input.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from src.core.schemas import Advocate, ExperienceLevel, SearchRequest

logger = logging.getLogger(__name__)

# A filter is a callable that takes advocates and returns a subset.
Filter = Callable[[Sequence[Advocate]], list[Advocate]]


def _fold(text: str) -> str:
    return text.casefold()


class _PredicateFilter(ABC):
    """Base for filters built on a per-advocate predicate."""

    @abstractmethod
    def is_active(self) -> bool:
        """Return False when the filter value is empty and every advocate passes."""

    @abstractmethod
    def matches(self, advocate: Advocate) -> bool:
        """Return True if the advocate satisfies this filter."""

    def __call__(self, advocates: Sequence[Advocate]) -> list[Advocate]:
        if not self.is_active():
            return list(advocates)
        result = [a for a in advocates if self.matches(a)]
        removed = len(advocates) - len(result)
        if removed:
            logger.debug("%s: removed %d advocates", type(self).__name__, removed)
        return result


class SearchTermFilter(_PredicateFilter):
    """Keep advocates where any searchable field contains the term.

    Years of experience are matched as their decimal string, so "1" matches
    1, 10 and 21. The phone number is never searched.
    """

    def __init__(self, term: str) -> None:
        self._term = _fold(term)

    def is_active(self) -> bool:
        return bool(self._term)

    def matches(self, advocate: Advocate) -> bool:
        fields = (
            advocate.first_name,
            advocate.last_name,
            advocate.city,
            advocate.degree,
            *advocate.specialties,
            str(advocate.years_of_experience),
        )
        return any(self._term in _fold(field) for field in fields)


class CityFilter(_PredicateFilter):
    def __init__(self, city: str) -> None:
        self._city = _fold(city)

    def is_active(self) -> bool:
        return bool(self._city)

    def matches(self, advocate: Advocate) -> bool:
        return self._city in _fold(advocate.city)


class DegreeFilter(_PredicateFilter):
    def __init__(self, degree: str) -> None:
        self._degree = _fold(degree)

    def is_active(self) -> bool:
        return bool(self._degree)

    def matches(self, advocate: Advocate) -> bool:
        return self._degree in _fold(advocate.degree)


class SpecialtiesFilter(_PredicateFilter):
    """Keep advocates satisfying ALL requested specialties.

    A requested specialty is satisfied when some specialty of the advocate
    contains it. Extra specialties on the advocate are fine. Entries are not
    stripped, so an empty string is a literal requirement.
    """

    def __init__(self, specialties: Sequence[str]) -> None:
        self._required = [_fold(s) for s in specialties]

    def is_active(self) -> bool:
        return bool(self._required)

    def matches(self, advocate: Advocate) -> bool:
        own = [_fold(s) for s in advocate.specialties]
        return all(any(req in s for s in own) for req in self._required)


class ExperienceLevelFilter(_PredicateFilter):
    def __init__(self, level: ExperienceLevel) -> None:
        self._level = ExperienceLevel(level)

    def is_active(self) -> bool:
        return self._level is not ExperienceLevel.ANY

    def matches(self, advocate: Advocate) -> bool:
        return self._level.contains(advocate.years_of_experience)


def build_filter_chain(request: SearchRequest) -> list[Filter]:
    """Build the filter chain for a search request."""
    return [
        SearchTermFilter(request.search_term),
        CityFilter(request.city),
        DegreeFilter(request.degree),
        SpecialtiesFilter(request.specialties),
        ExperienceLevelFilter(request.experience_level),
    ]


def run_filter_chain(
    advocates: Sequence[Advocate],
    filters: list[Filter],
) -> list[Advocate]:
    """Apply filters in order, returning the surviving advocates."""
    result = list(advocates)
    for f in filters:
        result = f(result)
    return result
