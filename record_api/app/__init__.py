"""
Application package initializer.

The project is organised in layers: ``schemas`` define the records,
``repositories`` own their storage, ``services`` forward calls to the
repositories and ``api`` maps HTTP routes onto the services.  ``core``
holds settings, logging, the database pool and the error taxonomy.
"""

from .main import app  # noqa: F401
