"""Application layer orchestrating metadata use cases."""
