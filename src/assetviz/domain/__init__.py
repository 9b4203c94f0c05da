"""Domain layer — normalization, validation, and the domain tree.

This layer depends only on stdlib and tldextract.
It must never import from services, infrastructure, commands, or config.
"""
