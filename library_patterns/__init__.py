"""Library Patterns - Core Application Package

This package contains the core application modules including:
- Catalog coordination and notifications (catalog.py)
- Data models (book.py)
- Notification sinks (notifications.py)
- Scripted borrow/return scenario (scenario.py)
- Output helpers for the CLI (ui_helpers.py)
"""
