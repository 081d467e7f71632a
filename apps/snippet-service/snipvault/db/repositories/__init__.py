"""
Per-domain repository modules for database access.

`snipvault.db.crud` is the facade the service layer calls; these modules
hold the query implementations.
"""
