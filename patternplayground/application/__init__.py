"""Application layer - use cases built on the maze domain."""
