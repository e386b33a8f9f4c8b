"""Wrappers around the compiled contracts."""
from .og_inference import OGInferenceContract

__all__ = ["OGInferenceContract"]
