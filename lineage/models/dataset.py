# =============================================================================
# Dataset Identifier Models Module
# =============================================================================
# Defines models for normalized dataset identifiers:
# - EnvironmentTag: Deployment classification of a dataset
# - DatasetName: Validated logical dataset name type
# - DatasetIdentifier: Immutable platform-tagged dataset key
# =============================================================================

from enum import Enum
from typing import Annotated, Optional
from datahub.emitter import mce_builder as builder
from datahub.metadata.schema_classes import FabricTypeClass
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ..location_utils import PARTITION_MARKERS, SCHEME_SEPARATOR

__all__ = [
    "OBJECT_STORE_PLATFORM",
    "FABRIC_TYPES",
    "EnvironmentTag",
    "DatasetName",
    "DatasetIdentifier",
    "validate_dataset_name",
]

OBJECT_STORE_PLATFORM = "object-store"
"""Platform tag for datasets backed by object storage."""


# =============================================================================
# Environment Tag Enum
# =============================================================================

FABRIC_TYPES = {
    name: value
    for name, value in vars(FabricTypeClass).items()
    if not name.startswith("_") and isinstance(value, str)
}
"""Fabric types known to the lineage catalog, keyed by symbol name."""

EnvironmentTag = Enum("EnvironmentTag", FABRIC_TYPES, type=str, module=__name__)
EnvironmentTag.__doc__ = "Deployment classification of a dataset (catalog fabric types)."


# =============================================================================
# Dataset Name Validation
# =============================================================================


def validate_dataset_name(value: str) -> str:
    """
    Validate a normalized dataset name.

    Dataset names should:
    - Not be empty
    - Not start or end with '/'
    - Not contain partition markers or a scheme separator

    Args:
        value: Dataset name to validate

    Returns:
        The dataset name, unchanged

    Raises:
        TypeError: If the value is not a string
        ValueError: If the name format is invalid
    """
    if not isinstance(value, str):
        raise TypeError(f"Dataset name must be a string, got {type(value).__name__}")

    if not value:
        raise ValueError("Dataset name cannot be empty")

    if value.startswith("/") or value.endswith("/"):
        raise ValueError("Dataset name cannot start or end with '/'")

    if SCHEME_SEPARATOR in value:
        raise ValueError(
            f"Dataset name cannot contain scheme separator '{SCHEME_SEPARATOR}'"
        )

    for marker in PARTITION_MARKERS:
        if marker in value:
            raise ValueError(f"Dataset name cannot contain partition marker '{marker}'")

    return value


DatasetName = Annotated[
    str,
    Field(..., description="Logical dataset name (e.g., 'my-bucket/warehouse/table1')"),
    BeforeValidator(validate_dataset_name),
]
"""Dataset name type. Non-empty, no edge slashes, no partition or scheme tokens."""


# =============================================================================
# Dataset Identifier Model
# =============================================================================


class DatasetIdentifier(BaseModel):
    """
    Normalized, platform-tagged dataset key handed to the lineage catalog.

    Instances are immutable. ``platform_instance`` and ``environment_tag``
    are stored exactly as supplied by the caller.

    Attributes:
        platform: Storage system tag (default: "object-store")
        platform_instance: Instance/environment label, or None
        name: Normalized dataset name
        environment_tag: Deployment classification
    """

    model_config = ConfigDict(frozen=True)

    platform: str = Field(
        OBJECT_STORE_PLATFORM, min_length=1, description="Storage system tag"
    )
    platform_instance: Optional[str] = Field(
        None, description="Caller-supplied platform instance label"
    )
    name: DatasetName
    environment_tag: EnvironmentTag = Field(
        EnvironmentTag.PROD, description="Deployment classification"
    )

    @property
    def platform_urn(self) -> str:
        """
        Build the data platform URN.

        Format: urn:li:dataPlatform:[platform]
        """
        return builder.make_data_platform_urn(self.platform)

    @property
    def urn(self) -> str:
        """
        Build the canonical dataset URN.

        The platform instance, when set, prefixes the dataset name.

        Format: urn:li:dataset:([platform_urn],[instance.]name,[environment_tag])

        Returns:
            Dataset URN string
        """
        return builder.make_dataset_urn_with_platform_instance(
            platform=self.platform,
            name=self.name,
            platform_instance=self.platform_instance,
            env=self.environment_tag.value,
        )
