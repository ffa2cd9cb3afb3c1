from db import db
from models import UserModel
from tests.utils.api import ApiTestCase, cookie_value


class RegisterTestCase(ApiTestCase):
    def test_register_returns_new_user_id(self):
        response = self.register("alice", "a@x.com", "pw123")

        self.assertEqual(response.status_code, 201)
        body = response.get_json()
        self.assertEqual(body["message"], "User registered successfully")
        self.assertIsInstance(body["userId"], int)
        self.assertNotIn("password", body)

    def test_register_rejects_missing_fields(self):
        payloads = [
            {"email": "a@x.com", "password": "pw123"},
            {"username": "alice", "password": "pw123"},
            {"username": "alice", "email": "a@x.com"},
            {"username": "", "email": "a@x.com", "password": "pw123"},
        ]
        for payload in payloads:
            with self.subTest(payload=payload):
                response = self.client.post("/api/register", json=payload)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json(), {"error": "All fields are required"})

    def test_register_rejects_duplicate_email_regardless_of_other_fields(self):
        self.assertEqual(self.register("alice", "a@x.com", "pw123").status_code, 201)

        response = self.register("someone-else", "a@x.com", "different-password")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json(), {"error": "Email is already registered"})
        with self.app.app_context():
            self.assertEqual(UserModel.query.filter_by(email="a@x.com").count(), 1)

    def test_password_is_stored_as_hash(self):
        user_id = self.register("alice", "a@x.com", "pw123").get_json()["userId"]

        with self.app.app_context():
            user = db.session.get(UserModel, user_id)
            self.assertNotEqual(user.password, "pw123")
            self.assertNotIn("pw123", user.password)
            self.assertTrue(user.check_password("pw123"))
            for variant in ("pw124", "Pw123", "pw12", "pw1234", "xw123"):
                self.assertFalse(user.check_password(variant))

    def test_same_password_hashes_differently(self):
        first = self.register("alice", "a@x.com", "pw123").get_json()["userId"]
        second = self.register("bob", "b@x.com", "pw123").get_json()["userId"]

        with self.app.app_context():
            self.assertNotEqual(
                db.session.get(UserModel, first).password,
                db.session.get(UserModel, second).password,
            )


class LoginTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.register("alice", "a@x.com", "pw123")

    def test_login_sets_session_cookie(self):
        response = self.login("a@x.com", "pw123")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"message": "Login successful"})
        sid = cookie_value(response)
        self.assertTrue(sid)

        header = next(h for h in response.headers.getlist("Set-Cookie") if h.startswith("sid="))
        attributes = header.split("; ")[1:]
        self.assertIn("Max-Age=3600", attributes)
        self.assertIn("HttpOnly", attributes)
        self.assertNotIn("Secure", attributes)

    def test_each_login_issues_a_new_session(self):
        first = cookie_value(self.login("a@x.com", "pw123"))
        second = cookie_value(self.login("a@x.com", "pw123"))

        self.assertNotEqual(first, second)
        self.assertEqual(len(self.session_store), 2)

    def test_unknown_email_and_wrong_password_are_indistinguishable(self):
        unknown = self.login("nobody@x.com", "pw123")
        wrong = self.login("a@x.com", "pw124")

        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.get_json(), wrong.get_json())
        self.assertEqual(unknown.get_json(), {"error": "Invalid email or password"})
        self.assertIsNone(cookie_value(unknown))
        self.assertIsNone(cookie_value(wrong))

    def test_login_requires_email_and_password(self):
        response = self.client.post("/api/login", json={"email": "a@x.com"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json(), {"error": "Email and password are required"})
