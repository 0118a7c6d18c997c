"""Use-case layer for the fetch pipeline.

Modules here coordinate domain objects and ports without performing
transport I/O directly: the safe-call boundary, error classification, the
users repository and the resource dispatcher.
"""
