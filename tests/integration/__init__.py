"""
Integration tests for eventsource_wiring.

These tests compile complete registries with the projection resolver and
dispatch through the resulting locators. They need no external services;
span export tests are skipped when opentelemetry-sdk is not installed.
"""
