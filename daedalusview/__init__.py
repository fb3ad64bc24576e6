"""Backend-free display logic for a 3D part viewer: tube meshes, editing forms, lights, buttons and screen flow."""

__version__ = "0.1.0"