"""
Top‑level package for the PokéDex API.

Marks ``pokedex_api`` as a Python package so that the application can
be imported by its fully qualified name, e.g. ``pokedex_api.app.main``.
The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
