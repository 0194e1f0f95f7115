"""
Shared Infrastructure
=====================

Low-level technical concerns shared across modules:
- Logging setup
"""
