"""Reusable patterns for building checkout pricing verticals.

Each module demonstrates a self-contained pattern that can be adapted
to any shop: a pure-function pricing rules engine and frozen dataclass
domain configuration.
"""
