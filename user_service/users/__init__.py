"""
Users Module
============

Bounded context for user records.

Responsibilities:
- Look up user rows by identifier
- Seed the administrative account at startup
- Expose the lookup endpoints over HTTP
"""
