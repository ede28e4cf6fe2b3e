"""Console alarm clock with a four-week rotating schedule kept in a JSON file."""

__version__ = "0.1.0"
__all__ = ["__version__"]