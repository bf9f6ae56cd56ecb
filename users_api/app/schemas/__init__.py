"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the store's records so that the API
representation is decoupled from how users are held in memory.
"""
