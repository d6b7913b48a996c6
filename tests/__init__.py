"""
Tests Package - Unit Tests

Test structure:
- tests/conftest.py - Pytest configuration and shared fixtures
- tests/test_*.py - One module per component
"""
