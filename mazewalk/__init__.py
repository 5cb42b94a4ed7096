"""
Multi-level maze pathfinding.

Guides an agent from its start cell to a goal cell through one or more
stacked grid levels joined by one-way walkways, using depth-first,
breadth-first, or shortest-path search.
"""

__version__ = "0.1.0"
