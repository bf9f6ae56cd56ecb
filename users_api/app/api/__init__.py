"""
API package containing the HTTP routes.

``router`` in ``router.py`` includes every endpoint module found in
``endpoints`` and is mounted by ``create_app``.
"""
