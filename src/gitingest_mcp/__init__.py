"""MCP server for browsing GitHub and GitLab repositories without cloning them."""

__version__ = "0.3.1"
