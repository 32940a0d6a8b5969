"""
Core components for rail-scalars.
"""
