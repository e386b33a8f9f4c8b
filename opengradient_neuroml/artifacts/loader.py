"""
Artifact loader for compiled smart contracts.

This module loads the ABI, bytecode, and other metadata from the
Foundry-compiled contract artifacts (``out/<Name>.sol/<Name>.json``).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Union

from web3 import Web3

from .exceptions import MalformedArtifact, MissingArtifact

logger = logging.getLogger(__name__)

# Get the package root directory
PACKAGE_DIR = Path(__file__).resolve().parent.parent
# Artifacts are copied into the package by scripts/sync_artifacts.py
ARTIFACTS_DIR = PACKAGE_DIR / "out"

# Fallback to the forge output directory in a source checkout
if not ARTIFACTS_DIR.exists():
    ARTIFACTS_DIR = PACKAGE_DIR.parent / "out"

CONTRACT_NAME = "OGInference"

# Contract name mappings, relative to the artifacts directory
CONTRACT_PATHS = {
    "OGInference": "OGInference.sol/OGInference.json",
}


class ExportedInterface(NamedTuple):
    """The two artifact fields re-exported to callers."""

    abi: Optional[List[Dict[str, Any]]]
    bytecode: Optional[Union[str, Dict[str, Any]]]


def artifact_path(
    contract_name: str = CONTRACT_NAME,
    artifacts_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Resolve the artifact file for a contract.

    Args:
        contract_name: Name of the contract (e.g., 'OGInference')
        artifacts_dir: Directory holding forge output; defaults to ARTIFACTS_DIR

    Returns:
        Path to ``<artifacts_dir>/<Name>.sol/<Name>.json``

    Raises:
        ValueError: If the contract name is not recognized
    """
    if contract_name not in CONTRACT_PATHS:
        available = ", ".join(CONTRACT_PATHS.keys())
        raise ValueError(
            f"Unknown contract: {contract_name}. "
            f"Available contracts: {available}"
        )

    base = Path(artifacts_dir) if artifacts_dir is not None else ARTIFACTS_DIR
    return base / CONTRACT_PATHS[contract_name]


def load_artifact(
    contract_name: str = CONTRACT_NAME,
    artifacts_dir: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    Load the complete artifact JSON for a contract.

    Args:
        contract_name: Name of the contract
        artifacts_dir: Directory holding forge output; defaults to ARTIFACTS_DIR

    Returns:
        Complete artifact dictionary including ABI, bytecode, and metadata

    Raises:
        MissingArtifact: If the artifact file doesn't exist
        MalformedArtifact: If the artifact file is not valid JSON
        ValueError: If the contract name is not recognized
    """
    path = artifact_path(contract_name, artifacts_dir)
    logger.debug("Loading %s artifact from %s", contract_name, path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise MissingArtifact(
            f"Artifact file not found: {path}\n"
            f"Make sure the contracts have been compiled with 'forge build' "
            f"and copied with 'scripts/sync_artifacts.py'",
            path,
        ) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedArtifact(f"Artifact file is not valid JSON: {path}: {e}", path) from e


def load_exported_interface(
    artifacts_dir: Optional[Union[str, Path]] = None,
    contract_name: str = CONTRACT_NAME,
) -> ExportedInterface:
    """
    Load a contract artifact and project its ``abi`` and ``bytecode`` fields.

    The artifact shape is not validated: a field missing from the file,
    or a top level that is not a JSON object, comes back as ``None``.
    """
    fields = artifact_fields(load_artifact(contract_name, artifacts_dir))
    return ExportedInterface(
        abi=fields.get("abi"),
        bytecode=fields.get("bytecode"),
    )


def artifact_fields(artifact: Any) -> Dict[str, Any]:
    """The artifact's top-level fields; empty when it is not a JSON object."""
    return artifact if isinstance(artifact, dict) else {}


def get_abi(contract_name: str = CONTRACT_NAME) -> list:
    """
    Get the ABI for a specific contract.

    Args:
        contract_name: Name of the contract

    Returns:
        Contract ABI as a list
    """
    artifact = artifact_fields(load_artifact(contract_name))
    return artifact.get("abi", [])


def get_bytecode(contract_name: str = CONTRACT_NAME) -> str:
    """
    Get the deployment bytecode for a specific contract.

    Forge nests bytecode as ``{"object": "0x..."}``; both that and the
    flat string form are accepted.
    """
    artifact = artifact_fields(load_artifact(contract_name))
    return hex_field(artifact.get("bytecode"))


def get_deployed_bytecode(contract_name: str = CONTRACT_NAME) -> str:
    """Get the runtime (deployed) bytecode for a specific contract."""
    artifact = artifact_fields(load_artifact(contract_name))
    return hex_field(artifact.get("deployedBytecode"))


def hex_field(value: Any) -> str:
    """Flatten forge's ``{"object": "0x..."}`` bytecode form to a hex string."""
    if isinstance(value, dict):
        value = value.get("object")
    return value or "0x"


def get_contract_metadata(contract_name: str = CONTRACT_NAME) -> Dict[str, Any]:
    """
    Get metadata about the contract compilation.

    Args:
        contract_name: Name of the contract

    Returns:
        Dictionary containing compiler settings, source name, method identifiers
    """
    artifact = artifact_fields(load_artifact(contract_name))
    metadata = artifact_fields(artifact.get("metadata"))

    # forge records {"<source path>": "<contract name>"} here instead of
    # Hardhat's top-level contractName/sourceName
    settings = artifact_fields(metadata.get("settings"))
    target = artifact_fields(settings.get("compilationTarget"))
    source_name, target_name = next(iter(target.items()), (None, None))

    return {
        "contractName": artifact.get("contractName", target_name or contract_name),
        "sourceName": artifact.get("sourceName", source_name),
        "compiler": artifact.get("compiler", metadata.get("compiler")),
        "methodIdentifiers": artifact.get("methodIdentifiers", {}),
    }


def abi_signature(item: Dict[str, Any]) -> str:
    """Canonical signature of a function or event entry, e.g. ``infer(string,uint8)``."""
    return f"{item['name']}({','.join(canonical_types(item.get('inputs', [])))})"


def keccak_hex(text: str, length: int = 32) -> str:
    """First ``length`` bytes of keccak256(text) as a '0x'-prefixed hex string."""
    return "0x" + bytes(Web3.keccak(text=text)[:length]).hex()


def get_function_selector(contract_name: str, function_name: str) -> Optional[str]:
    """
    Get the function selector (4-byte signature) for a specific function.

    Args:
        contract_name: Name of the contract
        function_name: Name of the function

    Returns:
        Function selector as a '0x'-prefixed hex string, or None if not found
    """
    for item in get_abi(contract_name):
        if item.get("type") == "function" and item.get("name") == function_name:
            return keccak_hex(abi_signature(item), 4)

    return None


def canonical_types(params: List[Dict[str, Any]]) -> List[str]:
    """Canonical ABI types of a parameter list, with tuples expanded."""
    types = []
    for param in params:
        abi_type = param["type"]
        if abi_type.startswith("tuple"):
            inner = ",".join(canonical_types(param.get("components", [])))
            abi_type = f"({inner}){abi_type[len('tuple'):]}"
        types.append(abi_type)
    return types


def list_available_contracts() -> list:
    """
    List all available contracts in the package.

    Returns:
        List of contract names
    """
    return list(CONTRACT_PATHS.keys())


def validate_artifacts() -> Dict[str, bool]:
    """
    Validate that all expected artifacts are present and parse.

    Returns:
        Dictionary mapping contract names to availability status
    """
    status = {}
    for contract_name in CONTRACT_PATHS:
        try:
            load_artifact(contract_name)
            status[contract_name] = True
        except (MissingArtifact, MalformedArtifact):
            status[contract_name] = False

    return status
