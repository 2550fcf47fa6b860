"""Feature discovery and loading."""

from .loader import FeatureLoader
from .model import FeatureEntry, FeatureRecord, FeatureState

__all__ = ["FeatureEntry", "FeatureLoader", "FeatureRecord", "FeatureState"]
