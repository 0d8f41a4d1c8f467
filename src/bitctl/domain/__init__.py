"""Domain layer — bit arrays, operations, codecs, and float views.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
