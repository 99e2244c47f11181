class StackppError(Exception):
    """ Base class for all host-level Stack++ errors"""
    pass

class StackppLoadError(StackppError):
    """ Raised when a source file cannot be read"""
    pass

class StackppInputError(StackppError):
    """ Raised when standard input is closed while a program waits on `input`"""

class StackppRecursionError(StackppError):
    """ Raised when nested block evaluation exhausts the host call stack"""

class StackppConfigError(StackppError):
    """ Raised when a configuration value cannot be interpreted"""

# Language-level failures (popping an empty stack) are not exceptions:
# they are Error values, see stackpp.types.value.Error.
