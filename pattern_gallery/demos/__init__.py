"""Demos: one runnable driver per pattern.

Invariants:
    - Each driver narrates the abstract example, then the concrete one
    - Drivers take no arguments and read no configuration of their own
"""
