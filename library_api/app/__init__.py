"""
Application package initializer.

The service is organised in layers: ``core`` (configuration, logging,
database access), ``models`` (plain domain records), ``repositories``
(SQL access per table), ``services`` (business rules), ``schemas``
(request and response shapes) and ``api`` (HTTP routers and the error
translator).
"""

from .main import app  # noqa: F401
