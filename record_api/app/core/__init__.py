"""
Core infrastructure: settings, logging, database pool, security and
the error taxonomy shared by repositories and endpoints.
"""
