from typing import Any


class _NoScope:
    """Marker for an omitted scope; ``None`` is a valid scope value"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_SCOPE"

    def __reduce__(self):
        return (_NoScope, ())


NO_SCOPE = _NoScope()


def has_scope(scope: Any) -> bool:
    """Check if a scope value was supplied"""
    return scope is not NO_SCOPE
