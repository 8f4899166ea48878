# =============================================================================
# Configuration Models Module
# =============================================================================
# Provides Pydantic Settings models for the lineage libraries:
# - NormalizerSettings: Defaults applied by PathNormalizer
# =============================================================================

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from .dataset import OBJECT_STORE_PLATFORM, EnvironmentTag

__all__ = ["NormalizerSettings"]


class NormalizerSettings(BaseSettings):
    """
    Configuration for dataset location normalization.

    Maps environment variables with prefix "LINEAGE_":
    - LINEAGE_PLATFORM_INSTANCE → platform_instance
    - LINEAGE_ENVIRONMENT → environment_tag
    - LINEAGE_PLATFORM → platform

    Attributes:
        platform_instance: Platform instance label (default: None)
        environment_tag: Environment classification (default: PROD)
        platform: Platform tag for normalized datasets (default: "object-store")
    """

    platform_instance: Optional[str] = Field(None, validation_alias="LINEAGE_PLATFORM_INSTANCE", description="Platform instance label")
    environment_tag: EnvironmentTag = Field(EnvironmentTag.PROD, validation_alias="LINEAGE_ENVIRONMENT", description="Environment classification")
    platform: str = Field(OBJECT_STORE_PLATFORM, min_length=1, validation_alias="LINEAGE_PLATFORM", description="Platform tag for normalized datasets")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated env vars from shared .env files
    )
