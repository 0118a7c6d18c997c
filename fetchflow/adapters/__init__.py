"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (HTTP and test doubles)
    used by the users repository.

Dependencies:
    Individual submodules depend on ``requests``, ``pydantic`` and domain
    protocol definitions.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests (for
    mocks and transport-level behavior verification).
"""
