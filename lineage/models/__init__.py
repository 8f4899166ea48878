# =============================================================================
# Data Models Library
# =============================================================================
# Pydantic models and settings for the lineage libraries.
# =============================================================================

"""
Data models for lineage extraction.

This library provides:
- DatasetIdentifier: Normalized dataset key
- EnvironmentTag: Deployment classification enum
- Configuration models
"""

__version__ = "0.1.0"

# Dataset models
from .dataset import (
    OBJECT_STORE_PLATFORM,
    FABRIC_TYPES,
    EnvironmentTag,
    DatasetName,
    DatasetIdentifier,
    validate_dataset_name,
)

# Configuration models
from .config import NormalizerSettings

__all__ = [
    # Dataset models
    "OBJECT_STORE_PLATFORM",
    "FABRIC_TYPES",
    "EnvironmentTag",
    "DatasetName",
    "DatasetIdentifier",
    "validate_dataset_name",
    # Configuration models
    "NormalizerSettings",
]
