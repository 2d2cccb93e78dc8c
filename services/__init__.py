"""
services/ - Business Logic Layer
=================================
Services accept loosely-typed input, build domain objects, and delegate
persistence to the repositories. No SQL lives here.
"""
