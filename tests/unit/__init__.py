"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with stubbed dependencies.
Unit tests should be fast, deterministic, and focused.
"""
