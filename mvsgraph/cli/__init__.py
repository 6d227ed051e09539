"""Command implementations for the mvsgraph CLI."""
