from gitingest_mcp.infrastructure.configuration import Settings
from gitingest_mcp.infrastructure.entrypoints.mcp import create_server
from gitingest_mcp.infrastructure.observability import configure_logging


def main() -> None:
    """Run the MCP server over stdio."""
    settings = Settings()
    configure_logging(settings.log_level, settings.log_format)
    create_server(settings).run()


if __name__ == "__main__":
    main()
