"""Classic data structures and algorithms in plain Python.

Modules: sorting, arrays, singly, circular, doubly, ring, adapters,
graphs, expressions, strings, recursion and problems.
"""

__version__ = "0.1.0"

__all__ = [
    "adapters",
    "arrays",
    "circular",
    "doubly",
    "expressions",
    "graphs",
    "problems",
    "recursion",
    "ring",
    "singly",
    "sorting",
    "strings",
]