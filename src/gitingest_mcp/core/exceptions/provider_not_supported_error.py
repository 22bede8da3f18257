from gitingest_mcp.core.exceptions.invalid_input_error import InvalidInputError


class ProviderNotSupportedError(InvalidInputError):
    """Raised when a repository identifier names an unknown git provider."""

    def __init__(self, provider: str, supported: list[str]) -> None:
        self.provider = provider
        self.supported = supported
        super().__init__(
            f"Git provider '{provider}' is not supported. "
            f"Supported providers: {', '.join(supported)}"
        )
