"""Core record model, handler ports and dispatch primitives."""
