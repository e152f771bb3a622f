from .config_validators import to_uppercase, to_lowercase, strip_message

__all__ = ["to_uppercase", "to_lowercase", "strip_message"]
