"""An incremental clicker game with buildings that generate income."""

__version__ = "0.1.0"
__all__ = ["__version__"]