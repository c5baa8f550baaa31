"""Core Layer: pure building blocks, no IO.

Invariants:
    - No module in core/ imports from behavioral/, creational/, demos/ or infrastructure/
    - Narration is collected in memory; printing happens in the shell
"""
