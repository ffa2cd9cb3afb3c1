'''
----------------------------
Registration and login
Used by resources/user.py
----------------------------
'''

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from db import db
from errors import DuplicateEmailError, InternalError, InvalidCredentialsError, ValidationError
from models import UserModel

logger = logging.getLogger(__name__)


def register_user(username, email, password):
    """Create a user account and return its id.

    Raises ValidationError when a field is missing or empty and
    DuplicateEmailError when the email already belongs to an account.
    """
    if not username or not email or not password:
        raise ValidationError("All fields are required")

    if UserModel.query.filter_by(email = email).first():
        raise DuplicateEmailError()

    user = UserModel(username = username, email = email)
    user.set_password(password)

    try:
        db.session.add(user)
        db.session.commit()
    # Unique constraint caught a concurrent registration with the same email
    except IntegrityError:
        db.session.rollback()
        raise DuplicateEmailError()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Registration failed: %s", type(e).__name__)
        raise InternalError("Failed to register user")

    logger.info("Registered user %s", user.id)
    return user.id


def login_user(email, password, session_store):
    """Verify credentials and issue a new session for the user."""
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = UserModel.query.filter_by(email = email).first()

    # user must not be null, and verify must return True
    if user is None or not user.check_password(password):
        logger.info("Rejected login attempt")
        raise InvalidCredentialsError()

    session = session_store.create(user.id)
    logger.info("User %s logged in", user.id)
    return session
