"""
Eviction: a side-scrolling arcade game built on pygame.

Run with ``python -m eviction`` or the ``eviction-platformer`` script.
"""

__version__ = "0.1.0"
