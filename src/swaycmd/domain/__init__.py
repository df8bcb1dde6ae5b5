"""Domain layer: the command grammar and the command builders.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
