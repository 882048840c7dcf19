"""
Core domain models, arithmetic primitives, and invariants.

This module contains the foundational building blocks of decimal
digit-string arithmetic and Karatsuba multiplication.
"""
