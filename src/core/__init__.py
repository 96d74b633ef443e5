"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the computation
engine: pure functions with no persistence, UI, or transport concerns.
"""
