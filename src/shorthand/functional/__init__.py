"""Functional primitives for Shorthand.

This module provides the single-pass iteration helpers (filter, reject, map,
reduce, all, any, none) as free functions over ordered sequences. Utilities
are stateless and side-effect-free apart from invoking the caller's own
callables, so they can be composed freely.
"""
