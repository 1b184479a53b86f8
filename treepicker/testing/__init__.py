"""Testing utilities for TreePicker.

This module provides sample data for testing code that uses pickers.
"""

from .fixtures import Location, location, locations_tree

__all__ = ['Location', 'location', 'locations_tree']
