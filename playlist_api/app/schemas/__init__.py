"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the store so that the API
representation can evolve independently of how songs are held in
memory.
"""
