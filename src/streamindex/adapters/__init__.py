"""Adapters (infrastructure) for STREAMINDEX.

Provide concrete implementations of the ports defined in
`streamindex.interfaces` (currently the item store).

Dependency rule: may import `streamindex.interfaces`; the interfaces must not
import this package.
"""
