"""
Dumpling AI tool descriptors.

Every module in this package is scanned by registry.discover_tools(); each
module-level ProxyTool instance becomes one MCP tool. Modules whose name
starts with an underscore hold shared helpers and are skipped.
"""
