"""A two-player local arcade shooter with selectable ships."""

__version__ = "0.1.0"
__all__ = ["__version__"]