"""HTML escaping and strict UTF-8 decoding helpers for template output, in tmplescape.utils."""

__version__ = "0.1.0"
__all__ = ["utils"]