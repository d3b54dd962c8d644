"""Decoding of base64 registry authorization tokens."""

import base64
import binascii

from ..entities import DecodedCredential
from ..exceptions import InvalidEncodingError, MalformedCredentialFormatError


def decode_token(raw_token: str) -> DecodedCredential:
    """
    Decode an authorization token into its username and password.

    Args:
        raw_token: Standard base64 encoding of ``<user>:<password>``.

    Returns:
        The decoded credential.

    Raises:
        InvalidEncodingError: If the token is not base64 encoded UTF-8.
        MalformedCredentialFormatError: If the decoded text is not exactly two
            colon-delimited fields.
    """
    try:
        text = base64.b64decode(raw_token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        msg = f"Error decoding authorization token: {e}"
        raise InvalidEncodingError(msg) from e

    fields = text.split(":")
    if len(fields) != 2:
        raise MalformedCredentialFormatError(text)

    username, password = fields
    return DecodedCredential(username=username, password=password)
