from gitingest_mcp.core.domain.shared.provider_type import ProviderType

__all__ = ["ProviderType"]
