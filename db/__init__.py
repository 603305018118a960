"""
db/ - Database Layer
====================
Owns the PostgreSQL store handle and the schema definition.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
