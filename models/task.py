from datetime import datetime, timezone

from db import db

class TaskModel(db.Model):
    __tablename__ = "tasks"

    id = db.Column(db.Integer, primary_key = True)
    title = db.Column(db.String(255), nullable = False)
    description = db.Column(db.Text)
    completed = db.Column(db.Boolean, default = False)
    # Free text, "medium" unless given
    priority = db.Column(db.String(50), default = "medium")
    due_date = db.Column(db.Date)
    # Not checked against existing projects when a task is written
    project_id = db.Column(db.Integer, db.ForeignKey("projects.id", ondelete = "CASCADE"), nullable = False)
    created_at = db.Column(db.DateTime(timezone = True), default = lambda: datetime.now(timezone.utc), nullable = False)
    updated_at = db.Column(
        db.DateTime(timezone = True),
        default = lambda: datetime.now(timezone.utc),
        onupdate = lambda: datetime.now(timezone.utc),
        nullable = False
    )

    project = db.relationship("ProjectModel", back_populates = "tasks")

    def __repr__(self):
        return f"<Task {self.id}>"
