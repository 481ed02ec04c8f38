__all__ = [
    "verify_password",
    "get_password_hash",
    "authorize",
    "get_current_user",
    "require_roles",
    "commit_session",
    "destroy_session",
    "render",
]


def __getattr__(name):
    if name in {
        "verify_password",
        "get_password_hash",
        "authorize",
        "get_current_user",
        "require_roles",
    }:
        from . import security as _security
        return getattr(_security, name)
    if name in {"commit_session", "destroy_session"}:
        from . import session_store as _session_store
        return getattr(_session_store, name)
    if name == "render":
        from . import rendering as _rendering
        return _rendering.render
    raise AttributeError(f"module 'mentorhub.utils' has no attribute '{name}'")
