"""Port interfaces (Protocols).

Services depend only on these, never on concrete adapters.
"""

from .options import BREAKPOINTS_OPTION, NETWORK_CODE_OPTION, InMemoryOptionStore, OptionStore

__all__ = [
    "BREAKPOINTS_OPTION",
    "InMemoryOptionStore",
    "NETWORK_CODE_OPTION",
    "OptionStore",
]
