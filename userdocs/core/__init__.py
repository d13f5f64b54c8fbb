"""Core Layer — pure logic, no IO, no framework imports.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or config
    - Randomness and clock are injected, so every function is testable
"""
