"""
repositories/ - Data Access Layer
==================================
`UserRepository` defines the persistence contract; each adapter implements
it against one backing store and returns domain model objects.
Store failures are translated into the errors in `repositories.errors`.
"""
