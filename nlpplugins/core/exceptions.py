"""Exception hierarchy for the nlpplugins package."""


class NLPPluginError(Exception):
    """Base exception for all nlpplugins errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigurationError(NLPPluginError):
    """Raised when a configuration value cannot be decoded."""

    pass


class MacroResolutionError(NLPPluginError):
    """Raised when a late-bound property cannot be rendered."""

    pass


class ConfigLoadError(NLPPluginError):
    """Raised when a plugin configuration file cannot be loaded."""

    pass


class ValidationFailedError(NLPPluginError):
    """Raised when collected validation failures abort the pipeline."""

    def __init__(self, message: str, failures: list | None = None):
        self.failures = list(failures or [])
        super().__init__(message, context={"failures": len(self.failures)})
