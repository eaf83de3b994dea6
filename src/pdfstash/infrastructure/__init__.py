"""Infrastructure layer — managed directory, collision handling, platform hooks.

This layer depends on stdlib and the domain layer.
It must never import from services, commands, or output.
"""
