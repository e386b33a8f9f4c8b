#!/usr/bin/env python3
"""Validate that all artifacts are accessible via loader"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from opengradient_neuroml.artifacts.exceptions import ArtifactError
from opengradient_neuroml.artifacts.loader import (
    artifact_fields,
    hex_field,
    load_artifact,
    list_available_contracts,
)


def validate():
    """Validate that all exposed contracts are loadable"""
    print("Validating package...")

    contracts = list_available_contracts()
    print(f"\nFound {len(contracts)} exposed contracts:")

    all_valid = True
    for name in contracts:
        try:
            artifact = artifact_fields(load_artifact(name))
        except ArtifactError as e:
            print(f"  ❌ {name}: {e}")
            all_valid = False
            continue

        abi = artifact.get("abi", [])
        bytecode = hex_field(artifact.get("bytecode"))

        if not abi:
            print(f"  ⚠️  {name}: No ABI found")
            all_valid = False
        elif bytecode == "0x":
            print(f"  ⚠️  {name}: No bytecode found")
            all_valid = False
        else:
            print(f"  ✅ {name}: {len(abi)} ABI items, {len(bytecode)} bytecode chars")

    print()
    if all_valid:
        print("✅ All contracts valid!")
        return 0
    else:
        print("❌ Some contracts failed validation")
        return 1


if __name__ == "__main__":
    sys.exit(validate())
