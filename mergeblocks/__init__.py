"""
Merge Blocks Solver

Finds the shortest sequence of pushes that joins every color of a
sliding, falling, merging block puzzle into one region.
"""

__version__ = "1.0.0"
