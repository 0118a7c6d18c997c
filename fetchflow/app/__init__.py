"""Application composition: settings, worker scope, controller wiring and entry point."""
