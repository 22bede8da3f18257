from gitingest_mcp.infrastructure.configuration.main_settings import Settings

__all__ = ["Settings"]
