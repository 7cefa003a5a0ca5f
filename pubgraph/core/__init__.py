"""Service layer behind the pubgraph CLI."""
