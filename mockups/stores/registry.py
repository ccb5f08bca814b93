"""Store backend registry."""

import importlib

_BACKENDS: dict[str, dict[str, type]] = {"repository": {}, "integration_log": {}}


def register(kind: str, name: str):
    """Decorator to register a store backend under a config name."""
    def decorator(cls):
        _BACKENDS[kind][name] = cls
        return cls
    return decorator


def get_backend_class(kind: str, name: str) -> type:
    """
    Get a backend class by config name.

    Names of the form "package.module:ClassName" are imported, so a
    deployment can plug in its own store without registering it here.
    """
    if ":" in name:
        module_path, _, class_name = name.partition(":")
        try:
            return getattr(importlib.import_module(module_path), class_name)
        except (ImportError, AttributeError) as e:
            raise ValueError(f"Cannot load {kind} backend {name}: {e}") from e
    if name not in _BACKENDS[kind]:
        raise ValueError(f"Unknown {kind} backend: {name}. Valid: {list_backends(kind)}")
    return _BACKENDS[kind][name]


def list_backends(kind: str) -> list[str]:
    """List registered backends of a kind."""
    return list(_BACKENDS[kind].keys())
