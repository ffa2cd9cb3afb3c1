'''
----------------------------
User/account actions
USER INTERACTIONS
----------------------------
'''

from flask import current_app, jsonify
from flask.views import MethodView
# Blueprint divides APIs into smaller segments
from flask_smorest import Blueprint

from schemas import UserLoginSchema, UserRegisterSchema, UserRegisteredSchema
from services.auth_service import login_user, register_user

blp = Blueprint("users", __name__, url_prefix = "/api", description = "Operations on users")


@blp.route("/register")
class UserRegister(MethodView):
    @blp.arguments(UserRegisterSchema)
    @blp.response(201, UserRegisteredSchema)
    def post(self, user_data):
        user_id = register_user(
            user_data.get("username"),
            user_data.get("email"),
            user_data.get("password")
        )
        return {"message": "User registered successfully", "user_id": user_id}


@blp.route("/login")
class UserLogin(MethodView):
    @blp.arguments(UserLoginSchema)
    def post(self, user_data):
        store = current_app.extensions["session_store"]
        session = login_user(user_data.get("email"), user_data.get("password"), store)

        response = jsonify({"message": "Login successful"})
        # Fixed lifetime, not refreshed by later requests
        response.set_cookie(
            current_app.config["AUTH_COOKIE_NAME"],
            session.sid,
            max_age = int(store.max_age.total_seconds()),
            httponly = True,
            secure = False,
            samesite = "Lax"
        )
        return response
