"""Configuration values shared across the package."""

# Numeric limits
LIMITS = {
    "max_value": 2**32 - 1,  # numbers are unsigned 32-bit
    "max_variable_depth": 100,  # nested variable lookups per evaluation
}

# REPL settings
REPL_CONFIG = {
    "prompts": {
        "infix": "INFIX > ",
        "postfix": "POSTFIX > ",
    },
    "exit_command": "exit",
    "list_command": "defined",
    "history_length": 1000,
    "banner": """
Hello and welcome! If you type in an expression according to this grammar

    expr -> factor + expr | factor
    factor -> term * factor | term
    term -> NUMBER | ( expr ) | VARIABLE

the program will be happy.

You can quit the REPL by typing `exit`.
You can list all variables by typing `defined`.
""",
}

# Logging
LOGGING_CONFIG = {
    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    "default_level": "WARNING",
}
