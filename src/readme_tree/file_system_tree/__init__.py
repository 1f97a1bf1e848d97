"""File system tree representation with configurable exclusion rules.

This module provides classes for reading directory listings, ordering siblings
and building the tree that the output strategies render.
"""
