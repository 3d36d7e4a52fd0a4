"""Library API application package.

Layers live in ``domain``, ``application``, ``infrastructure`` and
``interfaces``; the FastAPI entry point is ``main.create_app``.
"""
