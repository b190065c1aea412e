"""Core data models, payload schema and serialization."""
