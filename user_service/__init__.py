"""
User Service
============

HTTP service exposing user records backed by PostgreSQL, with admin
seeding at startup.
"""

__version__ = "1.0.0"
