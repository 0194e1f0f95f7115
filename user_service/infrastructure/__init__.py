"""
Infrastructure Layer
=====================

Low-level technical concerns shared by every module:
- Database connection management
"""
