"""Core conversion machinery shared by all entities."""
