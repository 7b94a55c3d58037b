"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the longhand square
root that are independent of the console (CLI, rendering).
"""
