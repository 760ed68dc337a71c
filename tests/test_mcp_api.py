import unittest
from unittest.mock import patch

import requests
from mcp.server.fastmcp import FastMCP

from mcp_server import API_URL, add_task, delete_task, list_tasks, mcp, update_task


class TestMcpTools(unittest.TestCase):

    def test_server_is_fastmcp(self):
        self.assertIsInstance(mcp, FastMCP)
        self.assertEqual(mcp.name, "Task List MCP Server")

    @patch("mcp_server.requests.get")
    def test_list_tasks(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = [{"id": 1, "title": "Mock Task", "completed": False}]

        tasks = list_tasks()
        mock_get.assert_called_once_with(f"{API_URL}/tasks")
        self.assertIsInstance(tasks, list)
        self.assertEqual(tasks[0]["title"], "Mock Task")

    @patch("mcp_server.requests.post")
    def test_add_task(self, mock_post):
        mock_post.return_value.status_code = 201
        mock_post.return_value.json.return_value = {"id": 2, "title": "New Task", "completed": False}

        task = add_task("New Task")
        mock_post.assert_called_once_with(
            f"{API_URL}/tasks", json={"title": "New Task", "completed": False}
        )
        self.assertEqual(task["title"], "New Task")

    @patch("mcp_server.requests.put")
    def test_update_task(self, mock_put):
        mock_put.return_value.json.return_value = {"id": 3, "title": "Done", "completed": True}

        task = update_task(3, "Done", True)
        mock_put.assert_called_once_with(
            f"{API_URL}/tasks/3", json={"title": "Done", "completed": True}
        )
        self.assertTrue(task["completed"])

    @patch("mcp_server.requests.delete")
    def test_delete_task(self, mock_delete):
        mock_delete.return_value.status_code = 204

        message = delete_task(4)
        mock_delete.assert_called_once_with(f"{API_URL}/tasks/4")
        self.assertEqual(message, "Task 4 deleted.")

    @patch("mcp_server.requests.delete")
    def test_delete_task_propagates_http_error(self, mock_delete):
        mock_delete.return_value.raise_for_status.side_effect = requests.HTTPError("404 Client Error")

        with self.assertRaises(requests.HTTPError):
            delete_task(999)


if __name__ == "__main__":
    unittest.main()
