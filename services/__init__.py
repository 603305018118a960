"""
services/ - Business Logic Layer
================================
Services are the only entry point for business operations. Each one
receives its repository through the constructor and never builds it itself.
"""
