"""Terminal and machine-readable renderers."""

from .payloads import features_payload
from .stdout import FeatureListReporter, render_configuration

__all__ = ["FeatureListReporter", "features_payload", "render_configuration"]
