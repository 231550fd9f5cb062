"""Bundle container images and compose files, with helpers for a rootless container runtime."""

__version__ = "0.1.0"