import unittest
from unittest.mock import Mock

import requests

from devurn.api.client import DevUrnHttpClient
from devurn.core.errors import InvalidInputError, MalformedUrnError, UnknownSubtypeError
from devurn.core.types import ErrorKind


def _response(status: int, payload: dict) -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    return response


class DevUrnHttpClientTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = Mock(spec=requests.Session)
        self.client = DevUrnHttpClient(base_url="http://api.local/", session=self.session)

    def test_generate_posts_payload(self) -> None:
        self.session.request.return_value = _response(
            200, {"urn": "urn:dev:mac:021b44fffe113ab7", "subtype": "mac", "input": "x", "valid": True}
        )

        urn = self.client.generate("mac", "00:1B:44:11:3A:B7")

        self.assertEqual(urn, "urn:dev:mac:021b44fffe113ab7")
        self.session.request.assert_called_once_with(
            "POST",
            "http://api.local/v1/generate",
            json={"subtype": "mac", "input": "00:1B:44:11:3A:B7"},
            timeout=10.0,
        )

    def test_detect_returns_subtype_or_none(self) -> None:
        self.session.request.return_value = _response(200, {"detected_subtype": None})
        self.assertIsNone(self.client.detect("hello"))

    def test_rejections_become_core_errors(self) -> None:
        self.session.request.return_value = _response(
            400, {"detail": {"error": "invalid-length", "message": "too short"}}
        )
        with self.assertRaises(InvalidInputError) as ctx:
            self.client.generate("ow", "1000008F12AA")
        self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_LENGTH)
        self.assertEqual(ctx.exception.message, "too short")

        self.session.request.return_value = _response(
            400, {"detail": {"error": "malformed-urn", "message": "Invalid DEV URN format"}}
        )
        with self.assertRaises(MalformedUrnError):
            self.client.breakdown("nope")

    def test_transport_failures_raise_runtime_error(self) -> None:
        self.session.request.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(RuntimeError):
            self.client.subtypes()

        self.session.request.side_effect = None
        self.session.request.return_value = _response(500, {})
        with self.assertRaises(RuntimeError):
            self.client.subtypes()

    def test_rejections_keep_reported_subtype_and_urn(self) -> None:
        self.session.request.return_value = _response(
            400,
            {
                "detail": {
                    "error": "unknown-subtype",
                    "message": "Unknown subtype: uuid",
                    "subtype": "uuid",
                    "urn": "urn:dev:uuid:1",
                }
            },
        )
        with self.assertRaises(UnknownSubtypeError) as unknown:
            self.client.breakdown("urn:dev:uuid:1")
        self.assertEqual(unknown.exception.subtype, "uuid")

        self.session.request.return_value = _response(
            400,
            {"detail": {"error": "malformed-urn", "message": "Invalid DEV URN format", "urn": "nope"}},
        )
        with self.assertRaises(MalformedUrnError) as malformed:
            self.client.breakdown("nope")
        self.assertEqual(malformed.exception.urn, "nope")


if __name__ == "__main__":
    unittest.main()
