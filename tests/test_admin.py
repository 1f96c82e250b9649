"""
Fish Catalog Test Suite: Admin Gate and Startup
===============================================
"""
import unittest
from unittest import mock

from fastapi.security import HTTPBasicCredentials
from fastapi.testclient import TestClient

import run
from fish_catalog_api.app.core.config import Settings
from fish_catalog_api.app.core.errors import ConfigurationError
from fish_catalog_api.app.core.security import ADMIN_USERNAME, check_credentials
from fish_catalog_api.app.main import create_app


class TestAdminPortal(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(create_app(Settings(admin_password="s3cret")))

    def test_no_credentials_is_unauthorized(self):
        resp = self.client.get("/admin")
        self.assertEqual(resp.status_code, 401)
        self.assertIn("permission", resp.text)
        self.assertEqual(resp.headers["www-authenticate"], "Basic")

    def test_wrong_password_is_unauthorized(self):
        resp = self.client.get("/admin", auth=("admin", "guess"))
        self.assertEqual(resp.status_code, 401)

    def test_wrong_username_is_unauthorized(self):
        resp = self.client.get("/admin", auth=("root", "s3cret"))
        self.assertEqual(resp.status_code, 401)

    def test_correct_credentials_get_html(self):
        resp = self.client.get("/admin", auth=("admin", "s3cret"))
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.headers["content-type"].startswith("text/html"))
        self.assertIn("Super secret admin portal", resp.text)


class TestCheckCredentials(unittest.TestCase):

    def test_missing_credentials(self):
        self.assertFalse(check_credentials(None, Settings(admin_password="x")))

    def test_unset_secret_never_matches(self):
        creds = HTTPBasicCredentials(username="admin", password="")
        self.assertFalse(check_credentials(creds, Settings(admin_password="")))

    def test_match(self):
        creds = HTTPBasicCredentials(username="admin", password="x")
        self.assertTrue(check_credentials(creds, Settings(admin_password="x")))

    def test_username_is_not_configurable(self):
        self.assertEqual(ADMIN_USERNAME, "admin")
        self.assertNotIn("admin_username", Settings.__dataclass_fields__)
        creds = HTTPBasicCredentials(username="root", password="x")
        self.assertFalse(check_credentials(creds, Settings(admin_password="x")))


class TestStartup(unittest.TestCase):

    def test_missing_password_is_fatal(self):
        with self.assertRaises(ConfigurationError):
            create_app(Settings(admin_password=""))

    def test_run_refuses_to_start_without_password(self):
        with mock.patch.object(run, "settings", Settings(admin_password="")), \
                mock.patch.object(run, "Server") as server:
            self.assertEqual(run.main(), 1)
        server.assert_not_called()


if __name__ == "__main__":
    unittest.main()
