"""Pure Python HighwayHash: keyed 64, 128 and 256-bit hashes, streaming, a command and a benchmark."""

__version__ = "1.0.0"
__all__ = ["benchmark", "cat", "cli", "core", "targets"]