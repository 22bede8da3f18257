from gitingest_mcp.infrastructure.resolution.container import Container, build_container
from gitingest_mcp.infrastructure.resolution.provider_resolver import ProviderResolver

__all__ = ["Container", "ProviderResolver", "build_container"]
