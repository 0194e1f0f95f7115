"""
Shared Kernel Module
====================

Generic infrastructure and API plumbing used by every module of the
service (structured logging, HTTP middleware, exception handlers).

DO NOT add user-specific logic to the shared kernel.
"""
