"""Test fixtures for juliakit tests.

- catalogs: versions.json content, parsed catalogs, tool caches and tarballs

Import fixtures in your tests using:
    from tests.fixtures.catalogs import sample_catalog
"""

__all__ = [
    "catalogs",
]
