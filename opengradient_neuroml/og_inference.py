"""Compiled OGInference contract: ``abi`` and ``bytecode``, read once at import."""

from pathlib import Path

from opengradient_neuroml.artifacts.loader import load_exported_interface

_interface = load_exported_interface(Path(__file__).resolve().parent / "out")

abi = _interface.abi
bytecode = _interface.bytecode

__all__ = ["abi", "bytecode"]
