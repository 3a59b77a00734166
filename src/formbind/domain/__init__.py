"""Domain layer: errors, property paths, type descriptors, user values.

This layer depends only on stdlib and pydantic.
It must never import from formatting, binding, config, or commands.
"""
