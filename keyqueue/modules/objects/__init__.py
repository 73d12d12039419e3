"""
Objects Module - Black Box Interface

Purpose: Copy, dispatch on and serialize plain object graphs
Interface: deep_copy(), execute_method(), stringify_exclude_seen(), is_object(), is_array()
Hidden: Traversal and cycle bookkeeping
"""

from .objects import deep_copy, execute_method, is_array, is_object, stringify_exclude_seen

__all__ = ["deep_copy", "execute_method", "is_array", "is_object", "stringify_exclude_seen"]
