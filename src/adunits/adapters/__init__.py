"""Infrastructure adapters implementing port interfaces."""

from .json_option_store import JsonFileOptionStore

__all__ = ["JsonFileOptionStore"]
