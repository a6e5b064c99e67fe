"""Services Layer — data access for the contact resource.

Invariants:
    - Services own every ORM call; routes never build queries
"""
