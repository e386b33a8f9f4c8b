"""
OGInference contract wrapper.

This module provides a high-level interface over the compiled OGInference
contract: ABI lookups, function selectors, event topics and the data a
deployment tool needs.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..artifacts.loader import (
    CONTRACT_NAME,
    abi_signature,
    artifact_fields,
    hex_field,
    keccak_hex,
    load_artifact,
)


class OGInferenceContract:
    """
    Wrapper for the OGInference smart contract.

    OGInference is the on-chain entry point for running NeuroML model
    inference on OpenGradient.
    """

    CONTRACT_NAME = CONTRACT_NAME

    def __init__(self, artifacts_dir: Optional[Union[str, Path]] = None):
        """Initialize the wrapper from the compiled artifact."""
        artifact = artifact_fields(load_artifact(self.CONTRACT_NAME, artifacts_dir))
        self.abi = artifact.get("abi", [])
        self.bytecode = hex_field(artifact.get("bytecode"))

    def _find(self, entry_type: str, name: str) -> Dict[str, Any]:
        for item in self.abi:
            if item.get("type") == entry_type and item.get("name") == name:
                return item
        raise ValueError(f"{entry_type.capitalize()} {name} not found in ABI")

    def get_function_abi(self, function_name: str) -> Dict[str, Any]:
        """
        Find the ABI entry of a function.

        Raises:
            ValueError: If the function is not in the ABI
        """
        return self._find("function", function_name)

    def get_event_abi(self, event_name: str) -> Dict[str, Any]:
        """
        Find the ABI entry of an event.

        Raises:
            ValueError: If the event is not in the ABI
        """
        return self._find("event", event_name)

    def function_names(self) -> List[str]:
        return [item["name"] for item in self.abi if item.get("type") == "function"]

    def event_names(self) -> List[str]:
        return [item["name"] for item in self.abi if item.get("type") == "event"]

    def function_signature(self, function_name: str) -> str:
        """Canonical signature, e.g. ``infer(string,uint8)``."""
        return abi_signature(self.get_function_abi(function_name))

    def event_signature(self, event_name: str) -> str:
        return abi_signature(self.get_event_abi(event_name))

    def function_selector(self, function_name: str) -> str:
        """
        Get the 4-byte function selector.

        Returns:
            Selector as a '0x'-prefixed hex string
        """
        return keccak_hex(self.function_signature(function_name), 4)

    def event_topic(self, event_name: str) -> str:
        """Get the topic0 hash of an event as a '0x'-prefixed hex string."""
        return keccak_hex(self.event_signature(event_name))

    def get_deployment_data(self) -> Dict[str, Any]:
        """
        Get the data a deployment tool needs for OGInference.

        Returns:
            Dictionary with bytecode, ABI and contract name

        Raises:
            ValueError: If the artifact carries no deployable bytecode
        """
        if not self.bytecode or self.bytecode == "0x":
            raise ValueError(f"{self.CONTRACT_NAME} artifact has no deployable bytecode")

        return {
            "bytecode": self.bytecode,
            "abi": self.abi,
            "contract_name": self.CONTRACT_NAME,
        }
