"""
Version 1 of the API.

Bundles the catalog and favorites endpoints.  Breaking changes should
go into a new version subpackage (e.g. ``v2``).
"""
