"""Schema primitives."""
