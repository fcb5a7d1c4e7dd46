"""Application layer: ports and use cases orchestrating the progress domain."""
