"""Custom exceptions for define_env."""


class DefineEnvError(Exception):
    """Base exception for define_env errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ProjectNotFoundError(DefineEnvError):
    """Raised when the project directory does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Project directory not found: {path}")
        self.path = path


class EnvFileNotFoundError(DefineEnvError):
    """Raised when the env file cannot be found."""

    def __init__(self, path: str):
        super().__init__(f"Env file not found: {path}")
        self.path = path


class InvalidEnvFileError(DefineEnvError):
    """Raised when the env file has invalid content."""

    def __init__(
        self,
        path: str,
        message: str = "Invalid env file format",
        key: str | None = None,
    ):
        super().__init__(f"Invalid env file {path}: {message}")
        self.path = path
        self.key = key


class ConfigFileNotFoundError(DefineEnvError):
    """Raised when a config file that must be updated does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Config file not found: {path}")
        self.path = path


class MalformedDocumentError(DefineEnvError):
    """Raised when a launch config cannot be parsed or has a malformed entry."""

    def __init__(self, message: str, path: str | None = None):
        full_message = "Malformed launch config"
        if path:
            full_message += f" in {path}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.reason = message


class MissingConfigurationsError(DefineEnvError):
    """Raised when a launch config has no "configurations" list."""

    def __init__(self, path: str | None = None):
        message = "Launch config has no 'configurations' list"
        if path:
            message += f": {path}"
        super().__init__(message)
        self.path = path
