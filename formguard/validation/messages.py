"""Default failure messages for built-in rules.

Templates with placeholders are filled with ``str.format``.
"""

DIGIT = "must include at least one digit"
SYMBOL = "must include at least one special character"
PATTERN = "does not match the pattern provided"
MINIMUM = "must be at least {length} character(s) long"
MAXIMUM = "must not be longer than {length} character(s)"
MATCHING = "does not match {property}"
REQUIRED = "must not be empty"
LOWERCASE = "must include at least one lowercase character"
UPPERCASE = "must include at least one uppercase character"
CUSTOM_VALIDATOR = "must match given validator"
