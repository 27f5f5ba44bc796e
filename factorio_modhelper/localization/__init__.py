from .messages import available_languages, get_language, get_message, set_language

__all__ = ["available_languages", "get_language", "get_message", "set_language"]
