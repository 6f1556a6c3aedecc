"""
Application package initializer.

The service is split into small layers: ``core`` holds configuration,
logging, errors, the cache and the database helpers; ``schemas`` holds
the Pydantic models for upstream payloads and API responses;
``services`` holds the catalog, detail, evolution and favorites logic;
``api`` exposes the versioned HTTP routes.

The ASGI application lives in ``pokedex_api.app.main`` and is built
only when that module is imported (``uvicorn pokedex_api.app.main:app``).
"""
