"""
Shared pytest fixtures for lineage tests.

Provides reusable test data fixtures to avoid duplication across test files.
"""

import pytest

from lineage.models import DatasetIdentifier, EnvironmentTag
from lineage.path_normalizer import PathNormalizer


# =============================================================================
# Location Fixtures
# =============================================================================

@pytest.fixture
def partitioned_location():
    """Raw location with a stamp_date partition and a part file."""
    return "s3://my-bucket/warehouse/table1/stamp_date=2023-05-01/part-00000"


@pytest.fixture
def mixed_locations(partitioned_location):
    """Batch of locations with two malformed entries."""
    return [
        partitioned_location,
        "warehouse/table1/part-00000",
        "obj://bucket/x/date_ymd=20240101/y",
        "s3://",
        "gs://bucket/table2",
    ]


# =============================================================================
# Dataset Identifier Fixtures
# =============================================================================

@pytest.fixture
def valid_identifier_dict():
    """Complete valid dataset identifier dictionary."""
    return {
        "platform": "object-store",
        "platform_instance": "prod",
        "name": "my-bucket/warehouse/table1",
        "environment_tag": "PROD",
    }


@pytest.fixture
def valid_identifier(valid_identifier_dict):
    """Complete valid DatasetIdentifier model instance."""
    return DatasetIdentifier(**valid_identifier_dict)


@pytest.fixture
def prod_normalizer():
    """PathNormalizer bound to the 'prod' instance."""
    return PathNormalizer(platform_instance="prod", environment_tag=EnvironmentTag.PROD)
