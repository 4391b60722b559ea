"""Employee Proxy Package — façade API over the upstream employee service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
