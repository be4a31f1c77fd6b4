import logging
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

import requests

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tag_action.errors import TagCreationError  # noqa: E402
from tag_action.resources.refs import Refs  # noqa: E402


class DummyClient:
    def __init__(self, response=None) -> None:
        self._logger = logging.getLogger("tag_action.tests")
        self.response = response
        self.request_calls: list[tuple[str, str, object, object, object]] = []

    def request(self, method, path, params=None, json=None, timeout=None):
        self.request_calls.append((method, path, params, json, timeout))
        return self.response


class RefsTests(unittest.TestCase):
    def test_create_posts_ref_and_sha(self):
        client = DummyClient({"ref": "refs/heads/feature"})
        refs = Refs(client)  # type: ignore[arg-type]
        result = refs.create("octo", "hello", "refs/heads/feature", "abc123", timeout=4)
        self.assertEqual(result, {"ref": "refs/heads/feature"})
        self.assertEqual(
            client.request_calls,
            [("POST", "/repos/octo/hello/git/refs", None, {"ref": "refs/heads/feature", "sha": "abc123"}, 4)],
        )

    def test_create_non_dict_returns_none(self):
        refs = Refs(DummyClient([]))  # type: ignore[arg-type]
        self.assertIsNone(refs.create("octo", "hello", "refs/tags/v1.0.0", "abc123"))

    def test_create_tag_returns_payload_unchanged(self):
        payload = {
            "ref": "refs/tags/v1.0.0",
            "node_id": "REF_x",
            "object": {"sha": "abc123", "type": "commit"},
        }
        client = DummyClient(payload)
        refs = Refs(client)  # type: ignore[arg-type]
        self.assertEqual(refs.create_tag("octo", "hello", "v1.0.0", "abc123"), payload)
        self.assertEqual(len(client.request_calls), 1)
        self.assertEqual(client.request_calls[0][3], {"ref": "refs/tags/v1.0.0", "sha": "abc123"})

    def test_create_tag_payload_without_ref_is_returned(self):
        refs = Refs(DummyClient({"url": "https://x"}))  # type: ignore[arg-type]
        self.assertEqual(refs.create_tag("octo", "hello", "v1.0.0", "abc123"), {"url": "https://x"})

    def test_create_tag_wraps_errors_without_retry(self):
        refs = Refs(DummyClient())  # type: ignore[arg-type]
        error = requests.HTTPError("422 Client Error\nServer message: Object does not exist")
        with patch.object(refs, "_post", side_effect=error) as mocked_post:
            with self.assertRaises(TagCreationError) as ctx:
                refs.create_tag("octo", "hello", "v1.0.0", "deadbeef")
        mocked_post.assert_called_once()
        message = str(ctx.exception)
        self.assertTrue(message.startswith('Failed to create tag "v1.0.0": '))
        self.assertIn("Object does not exist", message)
        self.assertEqual(ctx.exception.tag_name, "v1.0.0")

    def test_create_tag_empty_response_raises(self):
        refs = Refs(DummyClient(None))  # type: ignore[arg-type]
        with self.assertRaises(TagCreationError):
            refs.create_tag("octo", "hello", "v1.0.0", "abc123")


if __name__ == "__main__":
    unittest.main()
