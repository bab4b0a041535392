"""Interfaces (application boundary) for STREAMINDEX.

Defines framework-free contracts shared by the index and its adapters: the
item store port, identifier extraction, and the error hierarchy. Business
rules stay out of this package.

Dependency rule: this package is independent; do not import from any other
`streamindex.*` modules. It may be imported by `streamindex.stream_index`,
`streamindex.config` and `streamindex.adapters`.
"""
