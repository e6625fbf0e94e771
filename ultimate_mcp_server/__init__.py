"""
Ultimate MCP Server - a Model Context Protocol endpoint with a built-in toolbox.

The server answers initialize, tools/list and tools/call over HTTP and ships
roughly ninety stateless utility tools grouped into seven categories.
"""

__version__ = "1.0.0"
