"""Application layer: ports and the line-rendering use case."""
