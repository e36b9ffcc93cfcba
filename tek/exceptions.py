"""exceptions.py
Custom exception classes for the tek build-description generator.
"""

class TekError(Exception):
    """Base class for exceptions in this application."""
    pass

# -- Configuration Errors --
class ConfigurationError(TekError):
    """Exception related to configuration issues (e.g., bad settings, unreadable tek.yml)."""
    pass

class ProcessorConfigurationError(ConfigurationError):
    """Exception for processor entries in tek.yml that cannot be imported or used."""
    pass

# -- Registry Errors --
class RegistryError(TekError):
    """Exception for misuse of the processor registry lifecycle."""
    pass

# -- Processor Errors --
class ProcessorError(TekError):
    """Base class for errors raised while a processor derives paths or emits rules.

    Accepts arbitrary keyword arguments (e.g., filename, processor) so that callers
    can attach contextual information without breaking the exception signature.
    """

    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)

    def __str__(self):
        base = super().__str__()
        extras = {k: v for k, v in self.__dict__.items() if k not in ('args',)}
        if extras:
            return f"{base} | Context: {extras}"
        return base

class CacheLayoutError(ProcessorError):
    """A claimed filename does not contain the cache-directory marker."""
    pass

# -- Dispatch Errors --
class UnclaimedFileError(TekError):
    """No registered processor claims a filename (only raised in strict mode)."""
    pass

# -- Sink Errors --
class MakefileStateError(TekError):
    """Makefile operations were called out of order by a generator."""
    pass
