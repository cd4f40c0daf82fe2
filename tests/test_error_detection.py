from __future__ import annotations

from typing import Any
from unittest import TestCase

import pytest

from bcmapi import Error, ErrorDetector, Playlist, RemoteFault, Video, get_registry


class ErrorDetectorTests(TestCase):
    def setUp(self) -> None:
        self.detector = ErrorDetector(get_registry())

    def test_absent_or_null_error_is_not_a_fault(self) -> None:
        self.assertIsNone(self.detector.check({"result": 1}))
        self.assertIsNone(self.detector.check({"result": 1, "error": None}))

    def test_check_returns_fault_without_raising(self) -> None:
        fault = self.detector.check(
            {"error": {"name": "UnknownServerError", "message": "boom", "code": 100}}
        )

        self.assertIsInstance(fault, RemoteFault)
        assert fault is not None
        self.assertEqual(fault.code, 100)
        self.assertEqual(fault.name, "UnknownServerError")
        self.assertEqual(fault.message, "boom")
        self.assertIsNone(fault.cause)
        self.assertIsInstance(fault.error, Error)

    def test_inner_errors_become_a_cause_chain(self) -> None:
        fault = self.detector.check(
            {
                "error": {
                    "name": "UploadError",
                    "message": "upload failed",
                    "code": 200,
                    "innerError": {
                        "name": "StorageError",
                        "message": "disk full",
                        "code": 201,
                        "innerError": {"message": "quota reached"},
                    },
                }
            }
        )

        assert fault is not None
        chain = fault.chain()
        self.assertEqual([item.code for item in chain], [200, 201, None])
        self.assertEqual(chain[-1].message, "quota reached")
        self.assertIs(fault.__cause__, fault.cause)

    def test_error_list_is_decoded(self) -> None:
        fault = self.detector.check(
            {
                "error": {
                    "name": "ValidationError",
                    "message": "2 fields invalid",
                    "errors": [
                        {"name": "MissingField", "message": "name is required"},
                        {"name": "TooLong", "message": "referenceId too long"},
                    ],
                }
            }
        )

        assert fault is not None and fault.error is not None
        self.assertEqual(
            [item.name for item in fault.error.errors], ["MissingField", "TooLong"]
        )

    def test_plain_string_error_becomes_message(self) -> None:
        fault = self.detector.check({"error": "invalid token"})

        assert fault is not None
        self.assertEqual(fault.message, "invalid token")
        self.assertIn("invalid token", str(fault))

    def test_decode_raises_fault_from_nested_entity(self) -> None:
        payload = {
            "id": 1,
            "videoFullLength": {"error": {"message": "rendition unavailable"}},
        }

        with self.assertRaises(RemoteFault) as ctx:
            get_registry().resolve(Video).decode(payload)

        self.assertEqual(ctx.exception.message, "rendition unavailable")

    def test_error_entity_is_never_encoded(self) -> None:
        with self.assertRaises(TypeError):
            get_registry().resolve(Error).encode(Error(message="nope"))


@pytest.mark.parametrize(
    ("raw", "message"), [(500, "500"), (["x"], "['x']"), (True, "True")]
)
def test_unstructured_error_value_still_wins(raw: Any, message: str) -> None:
    with pytest.raises(RemoteFault) as excinfo:
        get_registry().resolve(Playlist).decode({"id": 1, "name": "Mix", "error": raw})

    assert excinfo.value.message == message
    assert excinfo.value.code is None
