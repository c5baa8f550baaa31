"""Behavioral Patterns: Strategy and Command."""
