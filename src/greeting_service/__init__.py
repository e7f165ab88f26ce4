"""
Greeting service: a FastAPI application answering ``GET /`` with a fixed text.
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
