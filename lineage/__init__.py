# =============================================================================
# Dataset Lineage Shared Libraries
# =============================================================================
# This package contains shared libraries for lineage extraction.
# See individual sub-packages for detailed documentation.
# =============================================================================

"""
Dataset lineage shared libraries.

Modules:
- models: Pydantic data models (dataset identifiers, settings)
- location_utils: Location string tokenization helpers
- path_normalizer: Raw location -> dataset identifier normalization
"""

__version__ = "0.1.0"
