"""Library Patterns - Services Package

This package contains service modules for external integrations:
- External ISBN system stub and its adapter
"""
