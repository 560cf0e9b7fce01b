"""
API package.

``router.py`` exposes the top-level ``router`` that bundles every
domain router defined in ``endpoints``.
"""
