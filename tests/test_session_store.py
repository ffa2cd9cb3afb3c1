import unittest
from datetime import datetime, timedelta, timezone

from session_store import SessionStore


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class SessionStoreTestCase(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.store = SessionStore(max_age=timedelta(hours=1), clock=self.clock)

    def test_create_and_get(self):
        session = self.store.create(7)

        self.assertEqual(session.user_id, 7)
        self.assertEqual(session.expires_at, self.clock.now + timedelta(hours=1))
        self.assertEqual(self.store.get(session.sid), session)

    def test_unknown_or_missing_id(self):
        self.assertIsNone(self.store.get("not-a-session"))
        self.assertIsNone(self.store.get(None))
        self.assertIsNone(self.store.get(""))

    def test_expiry_is_fixed_from_creation(self):
        session = self.store.create(7)

        self.clock.advance(minutes=59)
        self.assertIsNotNone(self.store.get(session.sid))

        # Reading did not extend the session
        self.clock.advance(minutes=1)
        self.assertIsNone(self.store.get(session.sid))
        self.assertEqual(len(self.store), 0)

    def test_create_purges_expired_sessions(self):
        old = self.store.create(1)
        self.clock.advance(hours=2)

        fresh = self.store.create(2)

        self.assertEqual(len(self.store), 1)
        self.assertIsNone(self.store.get(old.sid))
        self.assertIsNotNone(self.store.get(fresh.sid))

    def test_purge_expired_returns_count(self):
        self.store.create(1)
        self.store.create(2)
        self.clock.advance(hours=1)
        self.store.create(3)
        self.clock.advance(minutes=1)

        self.assertEqual(self.store.purge_expired(), 0)
        self.clock.advance(hours=1)
        self.assertEqual(self.store.purge_expired(), 1)
