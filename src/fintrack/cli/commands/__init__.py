"""CLI command groups, one module per entity."""
