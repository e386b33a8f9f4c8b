#!/usr/bin/env python3
"""
Copy compiled forge artifacts from out/ into the package data directory
"""
import shutil
import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from opengradient_neuroml.artifacts.loader import CONTRACT_PATHS


def sync_artifacts(source_dir: Path, package_dir: Path) -> bool:
    """Copy every artifact listed in CONTRACT_PATHS from source_dir to package_dir"""
    if not source_dir.exists():
        print(f"❌ Error: {source_dir} not found, run 'forge build' first")
        return False

    copied = []
    for name, relative in CONTRACT_PATHS.items():
        source = source_dir / relative
        if not source.exists():
            print(f"❌ Error: {source} not found")
            return False

        target = package_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        copied.append(name)

    print(f"✅ Copied {len(copied)} artifacts into {package_dir}:")
    for name in copied:
        print(f"   - {name}")

    return True


if __name__ == "__main__":
    root = Path(__file__).parent.parent
    success = sync_artifacts(root / "out", root / "opengradient_neuroml" / "out")
    sys.exit(0 if success else 1)
