"""userdocs — user-management demo API with an interactive API reference.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
