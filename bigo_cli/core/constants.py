"""
Constants used throughout the application.
"""

# File names
CONFIG_FILENAME = "bigo_cli_config.json"

# Spaces counted per tab when measuring indentation
TAB_WIDTH = 4

# Explanation suffix added when a caller inherits a callee's complexity
INCLUDES_CALLS_NOTE = " (includes function calls)"

# Calls never treated as intra-file callees
BUILTIN_FUNCTIONS = frozenset(
    {
        "print",
        "len",
        "range",
        "sum",
        "max",
        "min",
        "sorted",
        "list",
        "tuple",
        "set",
        "dict",
        "str",
        "int",
        "float",
        "bool",
        "enumerate",
        "zip",
        "map",
        "filter",
        "append",
        "extend",
        "insert",
        "remove",
        "pop",
        "clear",
        "index",
        "count",
        "sort",
        "reverse",
        "copy",
        "get",
        "keys",
        "values",
        "items",
    }
)

# Collections assumed to have a fixed, small size when iterated
CONSTANT_COLLECTION_NAMES = (
    "keywords",
    "operators",
    "patterns",
    "error_patterns",
    "directions",
    "constants",
    "fixed",
)

# Methods that grow a collection in place
GROWTH_METHODS = ("append", "extend", "add", "insert", "appendleft")

# Methods that mutate in place without allocating
IN_PLACE_METHODS = ("sort", "reverse", "pop", "clear", "remove")
