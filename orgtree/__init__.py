"""orgtree - organisation tree reports built on visitors."""

__version__ = "0.1.0"
