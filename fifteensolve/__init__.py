"""IDA* solver for the 15-puzzle with walking-distance heuristics."""

__version__ = "0.1.0"