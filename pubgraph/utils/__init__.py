"""Utility helpers shared across pubgraph."""
