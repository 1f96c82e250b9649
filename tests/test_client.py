"""
Fish Catalog Test Suite: HTTP Client
====================================
The requests session is mocked; no network access is needed.
"""
import json
import unittest
from unittest import mock

import requests

from fish_catalog_client import FishCatalogClient


def _response(status, body=b"", headers=None):
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.headers.update(headers or {})
    resp.url = "http://fish.test/x"
    return resp


def _json(status, data):
    return _response(status, json.dumps(data).encode(), {"content-type": "application/json"})


class TestFishCatalogClient(unittest.TestCase):

    def setUp(self):
        self.session = mock.Mock(spec=requests.Session)
        self.client = FishCatalogClient(
            base_url="http://fish.test/", admin_password="s3cret", session=self.session
        )

    def _last_call(self):
        return self.session.request.call_args.kwargs

    def test_list_fishes(self):
        self.session.request.return_value = _json(200, [{"id": "1", "name": "Salmon"}])
        fishes, error = self.client.list_fishes()
        self.assertIsNone(error)
        self.assertEqual(fishes, [{"id": "1", "name": "Salmon"}])
        self.assertEqual(self._last_call()["url"], "http://fish.test/fishes")
        self.assertFalse(self._last_call()["allow_redirects"])

    def test_get_fish_not_found(self):
        self.session.request.return_value = _response(404, b"fish 'x' not found")
        fish, error = self.client.get_fish("x")
        self.assertIsNone(fish)
        self.assertEqual(error, {"status_code": 404, "message": "fish 'x' not found"})

    def test_random_fish_id_reads_location(self):
        self.session.request.return_value = _response(302, headers={"location": "/fishes/123"})
        fish_id, error = self.client.random_fish_id()
        self.assertIsNone(error)
        self.assertEqual(fish_id, "123")

    def test_random_fish_id_on_empty_catalog(self):
        self.session.request.return_value = _response(404, b"no fishes in the catalog")
        fish_id, error = self.client.random_fish_id()
        self.assertIsNone(fish_id)
        self.assertEqual(error["status_code"], 404)

    def test_create_fish_sends_json(self):
        self.session.request.return_value = _json(200, {"id": "7", "name": "Pike"})
        fish, error = self.client.create_fish({"name": "Pike"})
        self.assertIsNone(error)
        self.assertEqual(fish["id"], "7")
        self.assertEqual(self._last_call()["method"], "POST")
        self.assertEqual(self._last_call()["json"], {"name": "Pike"})

    def test_json_error_detail_is_extracted(self):
        self.session.request.return_value = _json(405, {"detail": "Method Not Allowed"})
        _, error = self.client.create_fish({})
        self.assertEqual(error, {"status_code": 405, "message": "Method Not Allowed"})

    def test_admin_portal_uses_basic_auth(self):
        self.session.request.return_value = _response(200, b"<html>admin</html>")
        page, error = self.client.admin_portal()
        self.assertIsNone(error)
        self.assertEqual(page, "<html>admin</html>")
        self.assertEqual(self._last_call()["auth"], ("admin", "s3cret"))

    def test_admin_portal_without_password(self):
        client = FishCatalogClient(base_url="http://fish.test", session=self.session)
        page, error = client.admin_portal()
        self.assertIsNone(page)
        self.assertIsNotNone(error)
        self.session.request.assert_not_called()

    def test_network_failure_is_reported(self):
        self.session.request.side_effect = requests.ConnectionError("refused")
        fishes, error = self.client.list_fishes()
        self.assertEqual(fishes, [])
        self.assertIsNone(error["status_code"])
        self.assertIn("refused", error["message"])


if __name__ == "__main__":
    unittest.main()
