"""Typed subgraph query generator for Python."""

from .core import CodegenError, GenerationMethod, generate

__version__ = "0.1.0"

__all__ = ["CodegenError", "GenerationMethod", "generate", "__version__"]
