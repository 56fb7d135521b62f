"""
Persistence adapters.

Repositories encapsulate how pessoas are queried; services depend on them
instead of building SQL themselves.
"""
