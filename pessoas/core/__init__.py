"""
Core utilities shared across the Pessoa data-access package.

This package hosts:
- configuration helpers (env vars, database URL, paging defaults)
- the error taxonomy raised by repositories/services
- logging setup used by scripts and host applications
"""
