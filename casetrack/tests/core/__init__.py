"""Unit tests for core tracking logic.

These tests exercise the tracker without external dependencies.
Collaborator ports are replaced with in-memory fakes from tests/fakes/.
"""
