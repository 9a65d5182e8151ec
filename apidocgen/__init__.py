"""OpenAPI 3.0 documentation building blocks: components, extractors, parameters and responses."""

__version__ = "0.6.0"

__all__ = ["component", "extractors", "header", "models", "path", "query", "wrappers"]