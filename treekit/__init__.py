"""Binary tree nodes with traversals, metrics, an ASCII renderer and demos."""

__version__ = "0.1.0"
__all__ = ["demos", "display", "metrics", "node", "traversal"]