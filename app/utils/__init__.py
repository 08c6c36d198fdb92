# Utilities package
from .pagination import calculate_offset, calculate_total_pages

__all__ = [
    "calculate_offset",
    "calculate_total_pages",
]
