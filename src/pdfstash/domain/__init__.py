"""Domain layer — document names, value objects, and page markup.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
