"""Pattern Gallery: Strategy, Command and Abstract Factory teaching examples.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
