# =============================================================================
# Location Path Utilities
# =============================================================================
# Shared utilities for tokenizing raw storage location strings.
# Used by the path normalizer to derive logical dataset names.
# =============================================================================

"""
Location string utilities for lineage extraction.

This module provides functions for:
- Stripping partition segments (stamp_date=, date_ymd=) from locations
- Splitting the scheme prefix off a location
- Re-joining path segments without empty components
"""

from typing import Tuple

__all__ = [
    "SCHEME_SEPARATOR",
    "PARTITION_MARKERS",
    "MalformedLocationError",
    "strip_partitions",
    "split_scheme",
    "join_segments",
]

SCHEME_SEPARATOR = "://"

# Only these two keys are treated as partitions; other key=value segments
# are part of the logical dataset name.
PARTITION_MARKERS: Tuple[str, ...] = ("stamp_date=", "date_ymd=")


class MalformedLocationError(ValueError):
    """
    Raised when a location string cannot be reduced to a dataset name.

    Attributes:
        location: The raw location string that failed to normalize
    """

    def __init__(self, location: str, reason: str):
        self.location = location
        super().__init__(f"Malformed location '{location}': {reason}")


def strip_partitions(location: str) -> str:
    """
    Drop everything from the first partition marker onwards.

    Markers are applied in order: ``stamp_date=`` first, then ``date_ymd=``.
    A marker that is not present leaves the string unchanged.

    Args:
        location: Raw location string

    Returns:
        Location truncated before the first partition marker

    Examples:
        >>> strip_partitions("s3://bucket/t/stamp_date=2024-01-01/part-0")
        's3://bucket/t/'
        >>> strip_partitions("s3://bucket/t/date_ymd=20240101")
        's3://bucket/t/'
        >>> strip_partitions("s3://bucket/t")
        's3://bucket/t'
    """
    for marker in PARTITION_MARKERS:
        index = location.find(marker)
        if index != -1:
            location = location[:index]
    return location


def split_scheme(location: str) -> Tuple[str, str]:
    """
    Split a location into its scheme and the bucket/path portion.

    The path portion ends at a second scheme separator if one is present,
    so the result never contains the separator.

    Args:
        location: Location string (e.g., "s3://landing-zone/batch_001")

    Returns:
        Tuple of (scheme, remainder) e.g., ("s3", "landing-zone/batch_001")

    Raises:
        MalformedLocationError: If the location has no scheme separator

    Examples:
        >>> split_scheme("s3://landing-zone/batch_001")
        ('s3', 'landing-zone/batch_001')
        >>> split_scheme("gs://bucket/a")
        ('gs', 'bucket/a')
    """
    start = location.find(SCHEME_SEPARATOR)
    if start == -1:
        raise MalformedLocationError(
            location, f"missing scheme separator '{SCHEME_SEPARATOR}'"
        )

    scheme = location[:start]
    remainder = location[start + len(SCHEME_SEPARATOR):]

    end = remainder.find(SCHEME_SEPARATOR)
    if end != -1:
        remainder = remainder[:end]

    return scheme, remainder


def join_segments(path: str) -> str:
    """
    Re-join a path on '/' after dropping empty segments.

    Collapses doubled separators and removes leading/trailing ones.

    Examples:
        >>> join_segments("bucket//a/b/")
        'bucket/a/b'
        >>> join_segments("/")
        ''
    """
    return "/".join(segment for segment in path.split("/") if segment)
