"""Common single-character delimiters. Plain strings, usable anywhere a delimiter is accepted."""

AND = "&"
BACKSLASH = "\\"
COMMA = ","
DOLLAR = "$"
HASH = "#"
HYPHEN = "-"
OR = "|"
PERIOD = "."
PLUS = "+"
SEMICOLON = ";"
SLASH = "/"
SPACE = " "
UNDERSCORE = "_"

DEFAULT_DELIMITER = PERIOD
