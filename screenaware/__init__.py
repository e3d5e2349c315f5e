"""
Core package init for screenaware.

Activity logging, screen-time statistics, insight rules and the awareness quiz.
"""

__version__ = "0.1.0"

__all__ = [
    "analytics",
    "config",
    "export",
    "io_utils",
    "quiz",
    "storage",
    "types",
]
