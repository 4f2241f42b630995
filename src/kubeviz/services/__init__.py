"""Service layer — orchestration returning ServiceResult.

Services may import from domain, infrastructure, renderers, and plugins.
They must never import from commands or output.
"""
