#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from responsive_state.config.loader import ConfigLoader
from responsive_state.errors import ConfigurationError


def validate_config_dir(config_dir: Optional[Path] = None) -> bool:
    """Validate the responsive.yaml file in a config directory."""
    loader = ConfigLoader.create(config_dir)
    print(f"🔍 Validating {loader.config_file}...")

    if not loader.config_file.exists():
        print("ℹ️  No configuration file, defaults will be used")

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        for error in e.errors:
            print(f"  • {error.field}: {error.message} (value: {error.value!r})")
        return False

    reducer = loader.create_reducer()
    print(f"✅ {len(config['breakpoints'])} breakpoints are valid")
    for name, query in reducer.config.media_queries.items():
        print(f"  • {name}: {query}")
    return True


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None

    if validate_config_dir(config_dir):
        print("\n🎉 Configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
