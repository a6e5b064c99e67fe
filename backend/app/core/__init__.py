"""Core Layer — domain types, error hierarchy and boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO: everything here is plain data and type definitions
"""
