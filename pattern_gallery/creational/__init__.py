"""Creational Patterns: Abstract Factory."""
