"""
Core comparison primitives and contracts.

This module contains the foundational building blocks: three-way ordering,
fluent comparison checks, reusable predicates and declarative criteria.
"""
