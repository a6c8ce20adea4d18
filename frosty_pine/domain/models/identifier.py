"""
Entity identifiers: a UUID4 rendered as URL-safe base64.
"""

import base64
import binascii
import uuid

IDENTIFIER_LENGTH = 22


def new_identifier() -> str:
    """Generate a fresh 128-bit identifier."""
    return encode_identifier(uuid.uuid4())


def encode_identifier(value: uuid.UUID) -> str:
    """Render a UUID as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(value.bytes).rstrip(b'=').decode('ascii')


def decode_identifier(identifier: str) -> uuid.UUID:
    """Parse an identifier back into a UUID."""
    if not isinstance(identifier, str) or len(identifier) != IDENTIFIER_LENGTH:
        raise ValueError(f"Invalid identifier: {identifier!r}")
    
    try:
        raw = base64.urlsafe_b64decode(identifier + '==')
    except (binascii.Error, ValueError):
        raise ValueError(f"Invalid identifier: {identifier!r}")
    
    # Non-canonical trailing bits decode fine but would not round-trip
    if len(raw) != 16 or encode_identifier(uuid.UUID(bytes=raw)) != identifier:
        raise ValueError(f"Invalid identifier: {identifier!r}")
    
    return uuid.UUID(bytes=raw)


def is_identifier(value: object) -> bool:
    """Check whether ``value`` is a well-formed identifier."""
    try:
        decode_identifier(value)  # type: ignore[arg-type]
    except ValueError:
        return False
    return True
