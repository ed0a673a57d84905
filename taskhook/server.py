"""FastMCP server initialization for taskhook."""

from mcp.server.fastmcp import FastMCP

# Initialize the MCP server
mcp = FastMCP("taskhook")


def run() -> None:
    """Register the tools and run the MCP server."""
    import taskhook.tools  # noqa: F401

    mcp.run()


if __name__ == "__main__":
    run()
