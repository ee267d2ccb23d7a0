"""Domain layer — value objects, variants, and pure helpers.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
