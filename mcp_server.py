"""
MCP Server Wrapping the Task List API (`mcp_server.py`)
"""

import logging
import os
import sys

import requests
from mcp.server.fastmcp import FastMCP

logger = logging.getLogger(__name__)

API_URL = os.environ.get("TASKS_API_URL", "http://localhost:8080").rstrip("/")

# Initialize MCP server
mcp = FastMCP("Task List MCP Server")


@mcp.resource("tasks://list")
def list_tasks() -> list:
    """Fetch all tasks from the task API."""
    response = requests.get(f"{API_URL}/tasks")
    response.raise_for_status()
    return response.json()


@mcp.tool()
def add_task(title: str, completed: bool = False) -> dict:
    """Add a new task via the task API."""
    payload = {"title": title, "completed": completed}
    response = requests.post(f"{API_URL}/tasks", json=payload)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def update_task(task_id: int, title: str, completed: bool) -> dict:
    """Replace the title and completion state of an existing task."""
    payload = {"title": title, "completed": completed}
    response = requests.put(f"{API_URL}/tasks/{task_id}", json=payload)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def delete_task(task_id: int) -> str:
    """Delete a task by ID."""
    response = requests.delete(f"{API_URL}/tasks/{task_id}")
    response.raise_for_status()
    return f"Task {task_id} deleted."


def main():
    logging.basicConfig(stream=sys.stderr, level=logging.INFO)
    logger.info("Starting MCP server against %s", API_URL)
    # stdio transport for local testing
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
