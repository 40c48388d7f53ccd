"""
Pydantic schema definitions for records and API payloads.

Each domain (players, users, products) defines its own models.  The
same models travel between repository, service and endpoint layers;
there is no separate persistence model.
"""
