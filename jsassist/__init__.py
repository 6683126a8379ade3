"""Interactive assistant that prepares JavaScript projects for editor tooling."""

__version__ = "0.1.0"
