"""
HTTP layer.

Routers in ``endpoints`` map requests to service calls; ``errors``
turns failures into ``{"erros": [...]}`` bodies.  ``router.py``
aggregates the domain routers for mounting under ``/api``.
"""
