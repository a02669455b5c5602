"""Domain layer — the social graph model and its read-only algorithms.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
