from .settings import Settings, get_settings, DEFAULT_GENERIC_ERROR_MESSAGE

__all__ = ["Settings", "get_settings", "DEFAULT_GENERIC_ERROR_MESSAGE"]
