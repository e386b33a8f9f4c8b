"""
OpenGradient NeuroML contract package

Provides access to the compiled OGInference smart contract artifact
(ABI and bytecode) and helpers for working with its interface.
The load-once ``abi``/``bytecode`` surface lives in
``opengradient_neuroml.og_inference``.
"""

__version__ = "1.0.0"
__author__ = "OpenGradient"

from .artifacts.exceptions import ArtifactError, MalformedArtifact, MissingArtifact
from .artifacts.loader import (
    ExportedInterface,
    get_abi,
    get_bytecode,
    load_artifact,
    load_exported_interface,
    get_contract_metadata
)

from .contracts.og_inference import OGInferenceContract

__all__ = [
    'ArtifactError',
    'ExportedInterface',
    'MalformedArtifact',
    'MissingArtifact',
    'get_abi',
    'get_bytecode',
    'load_artifact',
    'load_exported_interface',
    'get_contract_metadata',
    'OGInferenceContract',
]
