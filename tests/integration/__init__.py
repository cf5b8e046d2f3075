"""
Integration Tests - End-to-End Pipeline Tests.

These tests run the whole pipeline with the stub enrichment service and
stub scoring oracle, so no network access is needed.
"""
