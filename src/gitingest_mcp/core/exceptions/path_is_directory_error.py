from gitingest_mcp.core.exceptions.invalid_input_error import InvalidInputError


class PathIsDirectoryError(InvalidInputError):
    """Raised when a file read targets a directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Expected a file but got a directory: {path}")
