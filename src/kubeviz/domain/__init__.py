"""Domain layer — pure graph construction, no I/O.

Modules here never import from services, commands, output, or renderers.
"""
