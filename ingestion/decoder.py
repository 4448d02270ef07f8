"""
Meme Decoder

Turns a raw response body into MemeRecord values.

GUARANTEES:
- All-or-nothing: one bad element rejects the whole body
- Unknown fields are ignored at every level
- Pure: the same bytes always decode to equal sequences
- Failures carry the JSON path of the offending value, written without a
  root prefix ("data.memes[1].id"); the document itself is the empty path
"""

from __future__ import annotations
from typing import Any, Optional, Tuple
import json

from backend.contracts.base import Error, ErrorCode, Result
from backend.observability import AuditOutcome, LogCollector

from .contracts import MemeListResponse, MemeRecord


# Wire field -> (record attribute, expected type)
MEME_FIELDS: Tuple[Tuple[str, str, type], ...] = (
    ('id', 'meme_id', str),
    ('name', 'name', str),
    ('url', 'image_url', str),
    ('width', 'width', int),
    ('height', 'height', int),
    ('box_count', 'box_count', int),
)


class SchemaViolation(Exception):
    """Raised internally while walking the document; never leaves this module."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _matches(value: Any, expected: type) -> bool:
    # JSON booleans decode to bool, which is an int subclass
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def _expected_name(expected: type) -> str:
    return {str: "string", int: "integer", bool: "boolean", dict: "object", list: "array"}[expected]


def _require(container: dict, key: str, expected: type, path: str) -> Any:
    field_path = f"{path}.{key}" if path else key
    if key not in container:
        raise SchemaViolation(field_path, "missing required field")
    value = container[key]
    if not _matches(value, expected):
        raise SchemaViolation(
            field_path,
            f"expected {_expected_name(expected)}, got {_type_name(value)}"
        )
    return value


class MemeDecoder:
    """
    Schema-validating decoder for the meme list response.

    Expected shape:
        {"success": bool, "data": {"memes": [ {id, name, url, width, height, box_count}, ... ]}}
    """

    def __init__(self, collector: Optional[LogCollector] = None):
        self._collector = collector

    def decode(self, raw_bytes: bytes) -> Result:
        """Decode into a tuple of MemeRecord."""
        result = self.decode_response(raw_bytes)
        if result.is_failure:
            return result
        return Result.success(result.value.memes)

    def decode_response(self, raw_bytes: bytes) -> Result:
        """Decode into the full MemeListResponse envelope."""
        try:
            document = json.loads(raw_bytes)
        except (ValueError, TypeError, RecursionError) as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
            # pathologically nested arrays exhaust the parser's recursion limit
            error = Error.create(ErrorCode.MALFORMED_PAYLOAD, f"Body is not valid JSON: {e}")
            return self._fail(error)

        try:
            response = self._parse_response(document)
        except SchemaViolation as e:
            error = (
                Error.create(ErrorCode.SCHEMA_VIOLATION, e.message)
                .with_context('path', e.path)
            )
            return self._fail(error)

        if self._collector:
            self._collector.record(
                'decode',
                AuditOutcome.SUCCESS,
                count=len(response.memes),
                success_flag=response.success,
            )
        return Result.success(response)

    def _parse_response(self, document: Any) -> MemeListResponse:
        if not isinstance(document, dict):
            raise SchemaViolation("", f"expected object, got {_type_name(document)}")

        success = _require(document, 'success', bool, "")
        data = _require(document, 'data', dict, "")
        memes = _require(data, 'memes', list, "data")

        records = tuple(
            self._parse_meme(element, f"data.memes[{index}]")
            for index, element in enumerate(memes)
        )
        return MemeListResponse(success=success, memes=records)

    def _parse_meme(self, element: Any, path: str) -> MemeRecord:
        if not isinstance(element, dict):
            raise SchemaViolation(path, f"expected object, got {_type_name(element)}")

        values = {
            attribute: _require(element, wire_name, expected, path)
            for wire_name, attribute, expected in MEME_FIELDS
        }
        return MemeRecord(**values)

    def _fail(self, error: Error) -> Result:
        if self._collector:
            self._collector.record(
                'decode',
                AuditOutcome.FAILURE,
                code=error.code.value,
                message=error.message,
                path=error.context_value('path') or '',
            )
        return Result.failure(error)
