"""Block-game protocol toolkit: framing, wire types, packet ID tables and collision physics."""

__version__ = "0.1.0"

__all__ = [
    "codec",
    "ids_early",
    "ids_late",
    "ids_middle",
    "physics",
    "protocol",
    "registry",
    "serial",
    "types",
]