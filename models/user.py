from datetime import datetime, timezone

# Salted, deliberately slow one-way hash; the plaintext is never stored
from passlib.hash import pbkdf2_sha256

from db import db

class UserModel(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key = True)
    username = db.Column(db.String(80), nullable = False)
    # Login identifier, must be unique
    email = db.Column(db.String(255), unique = True, nullable = False)
    # Stores the hash only
    password = db.Column(db.String(256), nullable = False)
    created_at = db.Column(db.DateTime(timezone = True), default = lambda: datetime.now(timezone.utc), nullable = False)
    updated_at = db.Column(
        db.DateTime(timezone = True),
        default = lambda: datetime.now(timezone.utc),
        onupdate = lambda: datetime.now(timezone.utc),
        nullable = False
    )

    # One user can have many projects
    # Projects delete if account is deleted
    projects = db.relationship("ProjectModel", back_populates = "user", lazy = "dynamic", cascade = "all, delete-orphan")

    def set_password(self, password):
        self.password = pbkdf2_sha256.hash(password)

    def check_password(self, password):
        return pbkdf2_sha256.verify(password, self.password)

    def __repr__(self):
        return f"<User {self.id}>"
