"""
models/ - Domain Layer
======================
Plain dataclasses for users, properties, reservations and search options.
Each model knows how to build itself from a database row dict.
"""
