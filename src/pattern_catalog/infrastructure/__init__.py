"""Infrastructure layer: logging, registries and singleton support."""
