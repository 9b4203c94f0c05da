"""Infrastructure layer — template loading and report file output.

This layer depends on stdlib and third-party libs (Jinja2).
It must never import from domain, services, commands, or output.
The service layer bridges between the domain tree and infrastructure.
"""
