"""Configuration, logging, errors, caching and storage helpers."""
