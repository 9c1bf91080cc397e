"""Application layer: stateful test helpers."""
