"""Domain layer — view types, queried content, and template name rules.

This layer depends only on stdlib and pydantic.
It must never import from hierarchy, host, infrastructure, commands, or config.
"""
