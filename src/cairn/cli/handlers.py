"""CLI subcommand handlers."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from cairn.exceptions.validation import format_errors
from cairn.host import Host
from cairn.reporting import FeatureListReporter, features_payload, render_configuration
from cairn.validation import preflight_validate


def handle_run(host: Host, feature: str, args: list[str]) -> int:
    """Run ``feature`` through the full load, configure, dispatch flow."""
    return host.dispatch(feature, args)


def handle_list(host: Host, *, output_format: str, load: bool = True, color: bool = False) -> int:
    """Print discoverable features, loading them first unless ``load`` is False."""
    if load:
        host.load_all_features()
    records = host.feature_records()

    if output_format == "json":
        print(json.dumps(features_payload(records, host.settings.library_dir), indent=2, sort_keys=True))
    else:
        print(FeatureListReporter(records, host.settings.library_dir, color=color).render())
    return 0


def handle_show_config(host: Host) -> int:
    """Evaluate configuration and print what was published."""
    host.reload()
    print(render_configuration(host.configuration, host.evaluator.current_source))
    return 0


def handle_validate_config(root: Path, settings_path: Path | None = None) -> int:
    """Run settings validation and report results."""
    errors = preflight_validate(root, settings_path)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
