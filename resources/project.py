'''
----------------------------
Project actions
USER INTERACTIONS
Every query is scoped to the logged-in owner
----------------------------
'''

import logging

from flask.views import MethodView
from flask_smorest import Blueprint
from sqlalchemy.exc import SQLAlchemyError

from access import AccessPolicy, access_policy, active_policy, current_user_id, project_delete_policy
from db import db
from errors import InternalError, NotFoundError
from models import ProjectModel
from schemas import MessageSchema, ProjectSchema

logger = logging.getLogger(__name__)

# Define the Blueprint for projects
blp = Blueprint("projects", __name__, url_prefix = "/api", description = "Operations on projects")

# Same body whether the project is missing or owned by someone else
NOT_FOUND_OR_DENIED = "Project not found or access denied"

UPDATABLE_FIELDS = ("name", "description", "status", "due_date")


def _find_owned_project(project_id):
    project = ProjectModel.query.filter_by(id = project_id, user_id = current_user_id()).first()
    if project is None:
        raise NotFoundError(NOT_FOUND_OR_DENIED)
    return project


# Endpoint for generic create and view projects
@blp.route("/projects")
class ProjectListAndCreate(MethodView):
    @access_policy(AccessPolicy.OWNER)
    @blp.response(200, ProjectSchema(many = True))
    def get(self):
        # Get all projects for the authenticated user
        try:
            return ProjectModel.query.filter_by(user_id = current_user_id()).order_by(ProjectModel.id).all()
        except SQLAlchemyError:
            logger.exception("Error fetching projects")
            raise InternalError("Failed to fetch projects")

    @access_policy(AccessPolicy.OWNER)
    @blp.arguments(ProjectSchema)
    @blp.response(201, ProjectSchema)
    def post(self, project_data):
        # Owner comes from the session, a userId in the body is never loaded
        project = ProjectModel(user_id = current_user_id(), **project_data)

        try:
            db.session.add(project)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Error creating project")
            raise InternalError("Failed to create project")

        return project


# Endpoint related to a specific project
@blp.route("/projects/<int:project_id>")
class ProjectResource(MethodView):
    @access_policy(AccessPolicy.OWNER)
    @blp.response(200, ProjectSchema)
    def get(self, project_id):
        try:
            return _find_owned_project(project_id)
        except SQLAlchemyError:
            logger.exception("Error fetching project %s", project_id)
            raise InternalError("Failed to fetch project")

    # Full replacement: fields missing from the body are cleared
    @access_policy(AccessPolicy.OWNER)
    @blp.arguments(ProjectSchema)
    @blp.response(200, ProjectSchema)
    def put(self, project_data, project_id):
        try:
            project = _find_owned_project(project_id)
            for field in UPDATABLE_FIELDS:
                setattr(project, field, project_data.get(field))
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Error updating project %s", project_id)
            raise InternalError("Failed to update project")

        return project

    @access_policy(project_delete_policy)
    @blp.response(200, MessageSchema)
    def delete(self, project_id):
        try:
            if active_policy() is AccessPolicy.OWNER:
                project = _find_owned_project(project_id)
            else:
                # Open policy: match by id alone
                project = db.session.get(ProjectModel, project_id)
                if project is None:
                    raise NotFoundError("Project not found")

            # Also deletes the project's tasks due to cascade
            db.session.delete(project)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Error deleting project %s", project_id)
            raise InternalError("Failed to delete project")

        return {"message": "Project deleted successfully"}
