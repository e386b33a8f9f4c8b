"""Artifact loading utilities for compiled smart contracts."""
from .exceptions import ArtifactError, MalformedArtifact, MissingArtifact
from .loader import ExportedInterface, get_abi, get_bytecode, load_artifact, load_exported_interface

__all__ = [
    "ArtifactError",
    "ExportedInterface",
    "MalformedArtifact",
    "MissingArtifact",
    "get_abi",
    "get_bytecode",
    "load_artifact",
    "load_exported_interface",
]
