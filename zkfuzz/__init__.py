"""Path coverage tracking and debuggable circuit syntax trees with a text dump."""

__version__ = "2.2.1"
__all__ = ["coverage", "debug_ast", "debug_format"]