"""Domain layer — selector rules and the object exercises.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
