"""MCP server for mesh-decal.

Registers all tools and runs via stdio transport.
"""

from mcp.server.fastmcp import FastMCP

from .tools.source import register_source_tools
from .tools.transform import register_transform_tools
from .tools.params import register_params_tools
from .tools.generate import register_generate_tools
from .tools.export import register_export_tools
from .tools.session import register_session_tools
from .tools.status import register_status_tools

mcp = FastMCP(
    "mesh-decal",
    instructions="Project decals onto meshes: clip a source mesh to an oriented decal volume and export the result",
)

# Register all tool groups
register_source_tools(mcp)
register_transform_tools(mcp)
register_params_tools(mcp)
register_generate_tools(mcp)
register_export_tools(mcp)
register_session_tools(mcp)
register_status_tools(mcp)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
