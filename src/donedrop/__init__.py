"""
DoneDrop - sinks completed checkbox tasks to the bottom of their group.
"""

from donedrop.tasks import Block, build_tree, needs_sort, render, sort, sort_level

__version__ = "0.1.0"

__all__ = ["Block", "build_tree", "needs_sort", "render", "sort", "sort_level", "__version__"]
