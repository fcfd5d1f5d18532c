"""Core Layer — pure user-profile rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Rule functions take "today" as an argument; they never read the clock

Design Decisions:
    - Functional core separated from imperative shell: the service orchestrates
      store calls around these rules
"""
