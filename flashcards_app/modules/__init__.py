"""Feature modules, each exposing a blueprint registered by core.module_registry."""
