"""Domain layer — labeled-name grammar, destination grammar, rendering.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
