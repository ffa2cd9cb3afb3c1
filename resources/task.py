'''
----------------------------
Task actions
OPEN ACCESS: no session or ownership checks
----------------------------
'''

import logging

from flask.views import MethodView
from flask_smorest import Blueprint
from sqlalchemy.exc import SQLAlchemyError

from access import AccessPolicy, access_policy
from db import db
from errors import InternalError, NotFoundError
from models import TaskModel
from schemas import TaskSchema

logger = logging.getLogger(__name__)

blp = Blueprint("tasks", __name__, url_prefix = "/api", description = "Operations on tasks")

MUTABLE_FIELDS = ("title", "description", "completed", "priority", "due_date", "project_id")


@blp.route("/tasks")
class TaskListAndCreate(MethodView):
    @access_policy(AccessPolicy.OPEN)
    @blp.response(200, TaskSchema(many = True))
    def get(self):
        try:
            return TaskModel.query.order_by(TaskModel.id).all()
        except SQLAlchemyError:
            logger.exception("Error fetching tasks")
            raise InternalError("Failed to fetch tasks")

    @access_policy(AccessPolicy.OPEN)
    @blp.arguments(TaskSchema)
    @blp.response(201, TaskSchema)
    def post(self, task_data):
        # projectId is stored as given, even if no such project exists
        task = TaskModel(**task_data)

        try:
            db.session.add(task)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Error creating task")
            raise InternalError("Failed to create task")

        return task


@blp.route("/tasks/<int:task_id>")
class TaskResource(MethodView):
    @access_policy(AccessPolicy.OPEN)
    @blp.response(200, TaskSchema)
    def get(self, task_id):
        try:
            task = db.session.get(TaskModel, task_id)
        except SQLAlchemyError:
            logger.exception("Error fetching task %s", task_id)
            raise InternalError("Failed to fetch task")

        if task is None:
            raise NotFoundError("Task not found")
        return task

    @access_policy(AccessPolicy.OPEN)
    @blp.arguments(TaskSchema)
    @blp.response(200, TaskSchema)
    def put(self, task_data, task_id):
        values = {field: task_data.get(field) for field in MUTABLE_FIELDS}

        try:
            updated_rows = TaskModel.query.filter_by(id = task_id).update(values, synchronize_session = False)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Error updating task %s", task_id)
            raise InternalError("Failed to update task")

        if updated_rows == 0:
            raise NotFoundError("Task not found")

        # Re-read after the bulk update
        return db.session.get(TaskModel, task_id)
