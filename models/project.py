from datetime import datetime, timezone

from db import db

class ProjectModel(db.Model):
    __tablename__ = "projects"

    id = db.Column(db.Integer, primary_key = True)
    name = db.Column(db.String(255), nullable = False)
    description = db.Column(db.Text)
    status = db.Column(db.String(50), default = "active")
    due_date = db.Column(db.Date)
    # Owner, fixed at creation
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete = "CASCADE"), nullable = False)
    created_at = db.Column(db.DateTime(timezone = True), default = lambda: datetime.now(timezone.utc), nullable = False)
    updated_at = db.Column(
        db.DateTime(timezone = True),
        default = lambda: datetime.now(timezone.utc),
        onupdate = lambda: datetime.now(timezone.utc),
        nullable = False
    )

    # User-project relationship
    user = db.relationship("UserModel", back_populates = "projects")
    # Tasks delete with their project
    tasks = db.relationship("TaskModel", back_populates = "project", lazy = "dynamic", cascade = "all, delete-orphan")

    def __repr__(self):
        return f"<Project {self.id}>"
