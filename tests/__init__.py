"""
Test Suite for Profile Screener.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline tests with stub services

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/profile_screener       # With coverage
"""
