"""Application layer - header parsing use cases."""
