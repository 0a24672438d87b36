"""Application layer: catalog lookup, argument handling, hooks and dispatch."""
