"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive raw rows from the database and return domain model objects.
Failed queries raise utils.exceptions.QueryFailedError; missing rows come back as None or [].
"""
