"""Status tool and resource: get_status, state://session."""

import json
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state


def register_status_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_status() -> str:
        """Return a summary of the current decal session.

        Shows whether a source mesh is loaded, both transforms, the decal
        params and the size of the last generated decal mesh.
        """
        return json.dumps(state.summary(), indent=2)

    @mcp.resource("state://session")
    def session_state() -> str:
        """Current session summary as JSON."""
        return json.dumps(state.summary(), indent=2)
