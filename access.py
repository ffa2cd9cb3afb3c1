'''
----------------------------
Access-control gate
Per-operation policy: scoped to the owner (session required) or open
----------------------------
'''

from enum import Enum
from functools import wraps

from flask import current_app, g, request

from errors import UnauthenticatedError


class AccessPolicy(str, Enum):
    OWNER = "scoped-to-owner"
    OPEN = "open"


def _resolve(policy):
    # Policies may be deferred to app config, e.g. the project delete policy
    if callable(policy):
        policy = policy()
    return AccessPolicy(policy)


def authenticate_request():
    """Bind ``g.user_id`` from the session cookie or raise UnauthenticatedError."""
    cookie_name = current_app.config["AUTH_COOKIE_NAME"]
    store = current_app.extensions["session_store"]

    session = store.get(request.cookies.get(cookie_name))
    if session is None:
        raise UnauthenticatedError()

    g.user_id = session.user_id
    return session.user_id


def access_policy(policy):
    """Attach an access policy to a resource method.

    ``OWNER`` runs the gate before the method body; ``OPEN`` never looks at the
    session cookie and leaves ``g.user_id`` unset. The policy can also be a
    callable returning one, evaluated per request.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            resolved = _resolve(policy)
            g.access_policy = resolved
            g.user_id = None
            if resolved is AccessPolicy.OWNER:
                authenticate_request()
            return fn(*args, **kwargs)

        wrapper.access_policy = policy
        return wrapper

    return decorator


def current_user_id():
    return g.get("user_id")


def project_delete_policy():
    return current_app.config["PROJECT_DELETE_POLICY"]


def active_policy():
    return g.get("access_policy")
