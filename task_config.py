"""
Default settings for the task list server.

Any value can be overridden with a TASKS_-prefixed environment variable,
e.g. TASKS_PORT=9090 or TASKS_LOG_LEVEL=DEBUG.
"""


class Config:
    HOST = "0.0.0.0"
    PORT = 8080
    LOG_LEVEL = "INFO"
    TESTING = False
