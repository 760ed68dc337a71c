"""
A Flask app exposing an in-memory task list API:

    GET    /tasks        list tasks
    POST   /tasks        create a task
    PUT    /tasks/<id>   update a task
    DELETE /tasks/<id>   delete a task
"""

import logging
import re
import sys

from flask import Blueprint, Flask, current_app, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException, NotFound
from werkzeug.routing import PathConverter

from task_config import Config
from task_store import TaskNotFound, TaskStore

logger = logging.getLogger(__name__)

tasks_bp = Blueprint("tasks", __name__)

TASK_ID_RE = re.compile(r"[+-]?[0-9]+")

# Task IDs are signed 64-bit integers
MIN_TASK_ID = -(2 ** 63)
MAX_TASK_ID = 2 ** 63 - 1


class TaskIdConverter(PathConverter):
    """Captures everything after /tasks/, including an empty segment."""

    regex = ".*?"
    part_isolating = False


def get_store() -> TaskStore:
    return current_app.extensions["task_store"]


def parse_task_id(segment: str) -> int:
    if not TASK_ID_RE.fullmatch(segment):
        raise BadRequest("invalid task id")
    try:
        task_id = int(segment)
    except ValueError:
        raise BadRequest("invalid task id")
    if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
        raise BadRequest("invalid task id")
    return task_id


def parse_task_body() -> dict:
    """
    Decode the request body as a Task object.

    A null field takes its default. The id field is checked for type but
    otherwise ignored; the server assigns IDs.
    """
    try:
        data = request.get_json(force=True)
    except RecursionError:
        raise BadRequest("task body is nested too deeply")
    if not isinstance(data, dict):
        raise BadRequest("task body must be a JSON object")

    task_id = data.get("id")
    if task_id is not None and (isinstance(task_id, bool) or not isinstance(task_id, int)):
        raise BadRequest("id must be an integer")

    title = data.get("title")
    completed = data.get("completed")
    if title is None:
        title = ""
    if completed is None:
        completed = False
    if not isinstance(title, str):
        raise BadRequest("title must be a string")
    if not isinstance(completed, bool):
        raise BadRequest("completed must be a boolean")
    return {"title": title, "completed": completed}


@tasks_bp.route("/tasks", methods=["GET"], provide_automatic_options=False)
def list_tasks():
    return jsonify(get_store().list_tasks())


@tasks_bp.route("/tasks", methods=["POST"], provide_automatic_options=False)
def create_task():
    fields = parse_task_body()
    task = get_store().create_task(**fields)
    return jsonify(task), 201


@tasks_bp.route("/tasks/<task_id:task_id>", methods=["PUT"], provide_automatic_options=False)
def update_task(task_id):
    task_id = parse_task_id(task_id)
    fields = parse_task_body()
    try:
        task = get_store().update_task(task_id, **fields)
    except TaskNotFound:
        raise NotFound("task not found")
    return jsonify(task)


@tasks_bp.route("/tasks/<task_id:task_id>", methods=["DELETE"], provide_automatic_options=False)
def delete_task(task_id):
    task_id = parse_task_id(task_id)
    try:
        get_store().delete_task(task_id)
    except TaskNotFound:
        raise NotFound("task not found")
    return "", 204


def handle_http_error(error: HTTPException):
    # Plain-text body; keeps headers such as Allow on 405
    response = error.get_response()
    response.set_data(error.description or error.name)
    response.content_type = "text/plain; charset=utf-8"
    return response


def create_app(store=None, test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("TASKS")
    if test_config is not None:
        app.config.from_mapping(test_config)

    # Task fields render as id, title, completed
    app.json.sort_keys = False

    app.extensions["task_store"] = store if store is not None else TaskStore()
    app.url_map.converters["task_id"] = TaskIdConverter
    app.register_blueprint(tasks_bp)
    app.register_error_handler(HTTPException, handle_http_error)
    return app


app = create_app()


def main():
    logging.basicConfig(stream=sys.stderr, level=app.config["LOG_LEVEL"])
    host, port = app.config["HOST"], app.config["PORT"]
    logger.info("Task server listening on %s:%s", host, port)
    app.run(host=host, port=port, threaded=True)


if __name__ == '__main__':
    main()
