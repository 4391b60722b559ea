"""Services — orchestration of upstream calls around pure core functions.

Invariants:
    - Services return outcomes; they never raise for upstream conditions
"""
