"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


class UnsupportedBackendError(ConfigurationError):
    """Raised when the schema is provisioned on an unsupported database."""

    def __init__(self, dialect: str, supported: tuple[str, ...]):
        self.dialect = dialect
        super().__init__(
            f"Database type not currently supported: {dialect} "
            f"(supported: {', '.join(supported)})"
        )
