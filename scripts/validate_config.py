#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vdiv_app.config.loader import ConfigLoader
from vdiv_app.config.validation import ConfigValidator


def main() -> None:
    """Validate config/settings.yaml merged over the defaults."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating configuration in {loader.config_dir}...")

    try:
        errors = ConfigValidator.validate_config(loader.merge_config())
    except Exception as e:
        print(f"❌ Could not load configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    config = loader.load()
    print("✅ Configuration is valid")
    print(f"  r2 window: {config.solver.r2_min_ohms:g} Ω – {config.solver.r2_max_ohms:g} Ω")
    print(f"  safety tolerance: {config.solver.safety_tolerance_volts} V")
    print(f"  explanations: {'on' if config.explanation.enabled else 'off'} ({config.explanation.model})")


if __name__ == "__main__":
    main()
