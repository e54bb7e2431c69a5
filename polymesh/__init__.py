"""Load polygonal meshes from CSV cell files, check them, and export them as UCD."""

__version__ = "1.0.0"
__all__ = ["__version__"]