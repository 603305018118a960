"""
models/ - Domain Layer
======================
Plain data holders. No persistence details live here.
"""
