# =============================================================================
# Path Normalizer
# =============================================================================
# Converts raw storage locations into normalized dataset identifiers
# for the lineage catalog.
# =============================================================================

"""
Raw location -> DatasetIdentifier normalization.

Example:
    >>> ident = normalize_location(
    ...     "s3://my-bucket/warehouse/table1/stamp_date=2023-05-01/part-00000",
    ...     "prod",
    ...     EnvironmentTag.PROD,
    ... )
    >>> ident.name
    'my-bucket/warehouse/table1'
"""

import logging
from typing import Iterable, List, Optional

from .location_utils import (
    MalformedLocationError,
    join_segments,
    split_scheme,
    strip_partitions,
)
from .models import (
    OBJECT_STORE_PLATFORM,
    DatasetIdentifier,
    EnvironmentTag,
    NormalizerSettings,
)

__all__ = [
    "normalize_location",
    "from_canonical_name",
    "normalize_locations",
    "PathNormalizer",
    "MalformedLocationError",
]

logger = logging.getLogger(__name__)


def _location_to_name(raw_location: str) -> str:
    if not isinstance(raw_location, str):
        raise TypeError(
            f"Location must be a string, got {type(raw_location).__name__}"
        )

    stripped = strip_partitions(raw_location)
    try:
        _, remainder = split_scheme(stripped)
    except MalformedLocationError as e:
        # Report the caller's location, not the partition-stripped one
        raise MalformedLocationError(raw_location, "missing scheme separator") from e
    name = join_segments(remainder)

    if not name:
        raise MalformedLocationError(raw_location, "no bucket or path after scheme")

    return name


def normalize_location(
    raw_location: str,
    platform_instance: Optional[str],
    environment_tag: EnvironmentTag,
    platform: str = OBJECT_STORE_PLATFORM,
) -> DatasetIdentifier:
    """
    Normalize a raw location string into a dataset identifier.

    Partition segments (``stamp_date=``, ``date_ymd=``) and everything after
    them are dropped, the scheme prefix is removed, and empty path segments
    are collapsed.

    Args:
        raw_location: Location string (e.g., "s3://bucket/table/stamp_date=2024-01-01/part-0")
        platform_instance: Platform instance label, passed through verbatim
        environment_tag: Environment classification, passed through verbatim
        platform: Platform tag (default: "object-store")

    Returns:
        DatasetIdentifier with the normalized name

    Raises:
        MalformedLocationError: If the location has no scheme separator or
            no bucket/path after it
        TypeError: If raw_location is not a string

    Examples:
        >>> normalize_location("obj://bucket/x/date_ymd=20240101/y", None, EnvironmentTag.DEV).name
        'bucket/x'
    """
    name = _location_to_name(raw_location)
    logger.debug(f"Normalized location '{raw_location}' to dataset name '{name}'")

    return DatasetIdentifier(
        platform=platform,
        platform_instance=platform_instance,
        name=name,
        environment_tag=environment_tag,
    )


def from_canonical_name(
    name: str,
    platform_instance: Optional[str],
    environment_tag: EnvironmentTag,
    platform: str = OBJECT_STORE_PLATFORM,
) -> DatasetIdentifier:
    """
    Build a dataset identifier from an already-normalized name.

    No partition or scheme stripping is applied. The name must already be
    canonical; invalid names fail model validation.

    Raises:
        pydantic.ValidationError: If the name is not a valid dataset name
    """
    return DatasetIdentifier(
        platform=platform,
        platform_instance=platform_instance,
        name=name,
        environment_tag=environment_tag,
    )


def normalize_locations(
    raw_locations: Iterable[str],
    platform_instance: Optional[str],
    environment_tag: EnvironmentTag,
    platform: str = OBJECT_STORE_PLATFORM,
    skip_malformed: bool = False,
) -> List[DatasetIdentifier]:
    """
    Normalize a batch of locations, preserving input order.

    Args:
        raw_locations: Location strings to normalize
        platform_instance: Platform instance label for every identifier
        environment_tag: Environment classification for every identifier
        platform: Platform tag (default: "object-store")
        skip_malformed: Log and skip malformed or non-string locations
            instead of raising

    Returns:
        List of DatasetIdentifier, one per accepted location

    Raises:
        MalformedLocationError: On the first malformed location, unless
            skip_malformed is True
        TypeError: On the first non-string location, unless skip_malformed
            is True
    """
    identifiers = []
    skipped = 0

    for raw_location in raw_locations:
        if skip_malformed and not isinstance(raw_location, str):
            skipped += 1
            logger.warning(
                f"Skipping location {raw_location!r}: not a string "
                f"(got {type(raw_location).__name__})"
            )
            continue

        try:
            identifiers.append(
                normalize_location(
                    raw_location, platform_instance, environment_tag, platform
                )
            )
        except MalformedLocationError as e:
            if not skip_malformed:
                raise
            skipped += 1
            logger.warning(f"Skipping location: {e}")

    if skipped:
        logger.info(
            f"Normalized {len(identifiers)} locations, skipped {skipped} malformed"
        )

    return identifiers


class PathNormalizer:
    """
    Location normalizer bound to a platform instance and environment tag.

    Configuration is fixed at construction and exposed read-only; safe to
    share between threads.

    Attributes:
        platform_instance: Platform instance label applied to every identifier
        environment_tag: Environment classification applied to every identifier
        platform: Platform tag (default: "object-store")
    """

    def __init__(
        self,
        platform_instance: Optional[str] = None,
        environment_tag: EnvironmentTag = EnvironmentTag.PROD,
        platform: str = OBJECT_STORE_PLATFORM,
    ):
        self._platform_instance = platform_instance
        self._environment_tag = environment_tag
        self._platform = platform

    @property
    def platform_instance(self) -> Optional[str]:
        return self._platform_instance

    @property
    def environment_tag(self) -> EnvironmentTag:
        return self._environment_tag

    @property
    def platform(self) -> str:
        return self._platform

    @classmethod
    def from_settings(
        cls, settings: Optional[NormalizerSettings] = None
    ) -> "PathNormalizer":
        """
        Create a normalizer from NormalizerSettings.

        Args:
            settings: Settings instance (default: loaded from environment)

        Returns:
            Configured PathNormalizer
        """
        if settings is None:
            settings = NormalizerSettings()
        return cls(
            platform_instance=settings.platform_instance,
            environment_tag=settings.environment_tag,
            platform=settings.platform,
        )

    def normalize(self, raw_location: str) -> DatasetIdentifier:
        """Normalize one raw location. See normalize_location()."""
        return normalize_location(
            raw_location, self.platform_instance, self.environment_tag, self.platform
        )

    def from_canonical_name(self, name: str) -> DatasetIdentifier:
        """Build an identifier from an already-normalized name."""
        return from_canonical_name(
            name, self.platform_instance, self.environment_tag, self.platform
        )

    def normalize_many(
        self, raw_locations: Iterable[str], skip_malformed: bool = False
    ) -> List[DatasetIdentifier]:
        """Normalize a batch of locations. See normalize_locations()."""
        return normalize_locations(
            raw_locations,
            self.platform_instance,
            self.environment_tag,
            self.platform,
            skip_malformed=skip_malformed,
        )

    def __repr__(self) -> str:
        return (
            f"PathNormalizer(platform_instance={self.platform_instance!r}, "
            f"environment_tag={self.environment_tag!r}, platform={self.platform!r})"
        )
