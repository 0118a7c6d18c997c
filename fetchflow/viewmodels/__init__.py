"""ViewModel package for UI state and command surfaces.

Call context:
    ``fetchflow/app/controller.py`` builds view models and hands them a
    ``WorkerScope``; views subscribe through ``on_state_changed``.

Dependencies:
    Modules in this package depend on domain types, use cases and the worker
    scope only. I/O adapters stay outside.

Responsibilities:
    - Hold immutable UI state snapshots updated through pure reducers.
    - Route Success / Error / Loading resources into state changes.
"""
