from gitingest_mcp.infrastructure.entrypoints.mcp.server_factory import create_server

__all__ = ["create_server"]
