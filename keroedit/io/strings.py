"""Length-prefixed string rules shared by the reader, the writer and model setters.

Strings are Shift-JIS encoded and limited by their encoded byte length.
Only descriptions may contain spaces.
"""

from __future__ import annotations

from keroedit.const import ENCODING, FieldKind
from keroedit.errors import FieldConstraintViolated, IllegalCharacter, StringTooLong


def encode_string(value: str, kind: FieldKind, field: str | None = None) -> bytes:
    """Validate a string for a field and return its encoded bytes.

    Args:
        value: String to encode
        kind: Kind of field, selects the length limit and space rule
        field: Name used in error messages (defaults to the kind)

    Raises:
        FieldConstraintViolated: value is not a str or not encodable
        StringTooLong: encoded length is above the limit
        IllegalCharacter: value contains a space and the kind forbids it
    """
    field = field or kind.value
    max_length = kind.max_length

    if not isinstance(value, str):
        raise FieldConstraintViolated(field, value, 'not a string')

    try:
        data = value.encode(ENCODING)
    except UnicodeEncodeError as e:
        raise FieldConstraintViolated(field, value, f'not representable in {ENCODING}') from e

    if len(data) > max_length:
        raise StringTooLong(field, value, max_length, len(data))
    if not kind.allows_spaces and ' ' in value:
        raise IllegalCharacter(field, value)
    return data


def decode_string(data: bytes, kind: FieldKind) -> str:
    """Decode string bytes read from a map file and apply the space rule."""
    try:
        value = data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise FieldConstraintViolated(kind.value, data, f'not valid {ENCODING}') from e

    if not kind.allows_spaces and ' ' in value:
        raise IllegalCharacter(kind.value, value)
    return value
