"""
Pydantic schema definitions.

``upstream`` describes the PokéAPI payloads consumed by the source
adapter; ``pokemon`` and ``favorite`` describe the records returned by
this API; ``common`` holds the response envelope.
"""
