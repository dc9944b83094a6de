"""Test suite for corext.

Test Structure:
- unit/: Unit tests for individual components (in-memory filesystem)
- integration/: Cache workflows against the real filesystem
- conftest.py: Shared fixtures
"""
