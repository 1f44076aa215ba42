"""String, memory, list and line-reading helpers, bit framing and a two-stack sorter."""

__version__ = "0.1.0"