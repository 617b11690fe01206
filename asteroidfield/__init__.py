"""An arcade asteroid shooter with a small sprite, sound, input, entity and scene engine."""

__version__ = "1.0.0"
__all__ = ["__version__"]