"""Shared configuration for colsplit."""

# Any run of characters that are not letters or digits
DEFAULT_SEPARATOR = r"[\W_]+"

# Number of row indices listed in a shape warning before truncating
MAX_REPORTED_INDICES = 20

# Strings treated as missing by type conversion
NA_STRINGS = frozenset({"NA"})

# Logical tokens recognised by type conversion
TRUE_STRINGS = frozenset({"T", "TRUE", "true", "True"})
FALSE_STRINGS = frozenset({"F", "FALSE", "false", "False"})

# Token accepted for `extra` by older releases, now treated as "warn"
DEPRECATED_EXTRA_ERROR = "error"
