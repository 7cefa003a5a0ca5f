"""Packaged default configuration for pubgraph."""
