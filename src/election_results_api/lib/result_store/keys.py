"""Composite keys for election result files.

A ``ResultKey`` names one result document by election type, year and
optional county, and maps it to a path relative to the data directory:

    national: ``{election_type}/{year}/{year}{election_type}.json``
    county:   ``{election_type}/{year}/{county}.json``
"""

import re
from dataclasses import dataclass
from pathlib import PurePosixPath

# Unicode word characters and hyphens only: no separators, dots or whitespace.
_SEGMENT_PATTERN = re.compile(r"[\w-]+")
_MAX_SEGMENT_LENGTH = 64

RESULT_SUFFIX = ".json"


class InvalidResultKeyError(ValueError):
    """Raised when a key segment cannot be used as a path component."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Invalid {field}: {value!r}")
        self.field = field
        self.value = value


def validate_segment(field: str, value: str) -> str:
    """Check that a single key segment is safe to use in a file path.

    Args:
        field: Segment name, used in the error message.
        value: Raw segment value from the request.

    Returns:
        The unchanged value.

    Raises:
        InvalidResultKeyError: If the value is empty, too long, or contains
            characters outside the allow-list.
    """
    if not value or len(value) > _MAX_SEGMENT_LENGTH or _SEGMENT_PATTERN.fullmatch(value) is None:
        raise InvalidResultKeyError(field, value)
    return value


@dataclass(frozen=True)
class ResultKey:
    """Lookup key for a national or county result document."""

    election_type: str
    year: str
    county: str | None = None

    def __post_init__(self) -> None:
        validate_segment("election_type", self.election_type)
        validate_segment("year", self.year)
        if self.county is not None:
            validate_segment("county", self.county)

    @property
    def is_county(self) -> bool:
        return self.county is not None

    @property
    def filename(self) -> str:
        stem = self.county if self.county is not None else f"{self.year}{self.election_type}"
        return f"{stem}{RESULT_SUFFIX}"

    @property
    def relative_path(self) -> PurePosixPath:
        """Path of the result file relative to the data directory."""
        return PurePosixPath(self.election_type, self.year, self.filename)

    @property
    def url_path(self) -> str:
        """Request path that serves this key."""
        parts = [self.election_type, self.year]
        if self.county is not None:
            parts.append(self.county)
        return "/" + "/".join(parts)

    def __str__(self) -> str:
        return self.url_path
