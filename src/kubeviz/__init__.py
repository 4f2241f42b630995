"""kubeviz — Kubernetes manifest dependency graph visualizer."""

__version__ = "0.3.0"
