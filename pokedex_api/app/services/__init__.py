"""
Service layer.

Each service encapsulates one piece of business logic (catalog
windows, detail aggregation, evolution resolution, favorites).  The
services are instantiated once in ``create_app`` and shared through
``app.state``; none of them keeps module‑level state.
"""
