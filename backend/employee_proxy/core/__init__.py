"""Core — pure domain logic: outcomes, mapping, aggregate queries, errors.

Invariants:
    - No IO in core modules; the shell (infrastructure/services) performs all calls
"""
