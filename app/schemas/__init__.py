"""
schemas/ — Pydantic response models for the signup API

Used for OpenAPI docs and for shaping error bodies. Request bodies are
read as raw JSON and validated by the controllers themselves.
"""
