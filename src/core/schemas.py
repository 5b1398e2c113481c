"""Core data models for the advocate directory search."""

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

DEFAULT_LIMIT = 10

# Wire format is camelCase (firstName, yearsOfExperience, ...); attributes stay snake_case.
_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ExperienceLevel(str, Enum):
    """Fixed experience buckets over years of experience.

    ANY matches every advocate. The other buckets are non-overlapping and
    cover every non-negative integer.
    """

    ANY = ""
    EMERGING = "emerging"
    ESTABLISHED = "established"
    EXPERT = "expert"

    def contains(self, years: int) -> bool:
        low, high = _EXPERIENCE_BUCKETS[self]
        return low <= years and (high is None or years <= high)


_EXPERIENCE_BUCKETS: dict[ExperienceLevel, tuple[int, int | None]] = {
    ExperienceLevel.ANY: (0, None),
    ExperienceLevel.EMERGING: (0, 3),
    ExperienceLevel.ESTABLISHED: (4, 7),
    ExperienceLevel.EXPERT: (8, None),
}

_LEVEL_VALUES = frozenset(level.value for level in ExperienceLevel)


class Advocate(BaseModel):
    """One entry in the directory. Frozen; the roster never changes after load."""

    model_config = _CAMEL_CONFIG

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    city: str = ""
    degree: str = ""
    specialties: tuple[str, ...] = ()
    years_of_experience: int = Field(default=0, ge=0)
    phone_number: int


class SearchRequest(BaseModel):
    """A single search: free-text term, structured filters and the page window.

    Every field is optional. Normalization:
      - explicit nulls fall back to the field default
      - a missing or non-positive ``limit`` becomes the default limit, which
        callers may override through the validation context (``default_limit``)
      - ``page`` is kept as given, even below 1
      - ``specialties`` entries are kept verbatim, empty strings included
    """

    model_config = _CAMEL_CONFIG

    search_term: str = ""
    page: int = 1
    limit: int = DEFAULT_LIMIT
    specialties: list[str] = Field(default_factory=list)
    city: str = ""
    degree: str = ""
    experience_level: ExperienceLevel = ExperienceLevel.ANY

    @model_validator(mode="before")
    @classmethod
    def apply_defaults(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        data = {k: v for k, v in data.items() if v is not None}
        if "limit" not in data:
            data["limit"] = _default_limit(info)
        return data

    @field_validator("limit")
    @classmethod
    def positive_limit(cls, v: int, info: ValidationInfo) -> int:
        if v <= 0:
            return _default_limit(info)
        return v

    @field_validator("experience_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        # Unrecognized levels do not filter, like an unset level.
        if isinstance(v, str):
            v = v.strip().lower()
            if v not in _LEVEL_VALUES:
                return ExperienceLevel.ANY
        return v

    @property
    def offset(self) -> int:
        """Index of the first record on the requested page, never negative."""
        return max(0, (self.page - 1) * self.limit)


def _default_limit(info: ValidationInfo) -> int:
    context = info.context or {}
    return context.get("default_limit", DEFAULT_LIMIT)


class PaginationResult(BaseModel):
    """Pagination metadata for one page of a filtered result set."""

    model_config = _CAMEL_CONFIG

    current_page: int
    total_pages: int = Field(ge=0)
    total_count: int = Field(ge=0)
    limit: int = Field(ge=1)
    has_next_page: bool
    has_previous_page: bool


class SearchResult(BaseModel):
    """One page of matching advocates plus its pagination metadata."""

    model_config = _CAMEL_CONFIG

    data: list[Advocate]
    pagination: PaginationResult

    def to_response(self) -> dict[str, Any]:
        """Serialize to the wire shape: ``{"data": [...], "pagination": {...}}``."""
        return self.model_dump(mode="json", by_alias=True)
