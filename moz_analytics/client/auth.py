"""Credential resolution and request authentication for the Moz API.

The Moz API accepts a single opaque token. Older accounts hold a base64
encoded ``access_id:secret_key`` pair instead, which can additionally be
used to compute an HMAC-SHA1 request signature. The resolution between the
two modes happens once, when the resolver is built, and never changes.

Example:
    ```python
    from moz_analytics.client.auth import AuthResolver

    auth = AuthResolver.from_credential("bXktaWQ6bXktc2VjcmV0")
    auth.mode               # "signature"
    auth.auth_headers()     # {"x-moz-token": "bXktaWQ6bXktc2VjcmV0"}
    ```
"""

import base64
import binascii
import hashlib
import hmac
import logging

from pydantic import BaseModel, ConfigDict, Field

from moz_analytics.exceptions.credential_error import MissingCredentialError

logger = logging.getLogger(__name__)

TOKEN_HEADER = "x-moz-token"


def _decode_credential_pair(credential: str) -> tuple[str, str] | None:
    """Try to decode a base64 ``access_id:secret_key`` pair.

    Returns:
        The (access_id, secret_key) tuple, or None when the credential is not
        base64, does not decode to UTF-8 text, or does not contain exactly
        one colon
    """
    try:
        decoded = base64.b64decode(credential, validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        return None

    if decoded.count(":") != 1:
        return None

    access_id, secret_key = decoded.split(":")
    return access_id, secret_key


class AuthResolver(BaseModel):
    """Immutable authentication settings resolved from one credential.

    Attributes:
        credential: The raw credential string as supplied by the caller
        access_id: Access ID decoded from the credential, if any
        secret_key: Secret key decoded from the credential, if any
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    credential: str = Field(..., description="Raw Moz API credential")
    access_id: str | None = Field(default=None, description="Decoded access ID")
    secret_key: str | None = Field(default=None, description="Decoded secret key")

    @classmethod
    def from_credential(cls, credential: str) -> "AuthResolver":
        """Resolve the authentication mode for a credential.

        Never raises on malformed input: anything that is not a base64 encoded
        pair with exactly one colon is treated as a raw token.

        Args:
            credential: Opaque credential string

        Returns:
            AuthResolver with the decoded pair set when one was found
        """
        pair = _decode_credential_pair(credential)
        if pair is None:
            logger.info("Using API token authentication (V3)")
            return cls(credential=credential)

        logger.info("Using Access ID/Secret Key authentication (V2)")
        access_id, secret_key = pair
        return cls(credential=credential, access_id=access_id, secret_key=secret_key)

    @property
    def mode(self) -> str:
        """Resolved mode: ``"signature"`` when both parts are known, else ``"token"``."""
        if self.access_id and self.secret_key:
            return "signature"
        return "token"

    def compute_signature(self, timestamp: int) -> str:
        """Compute the HMAC-SHA1 signature for a unix timestamp.

        The signed string is ``"{access_id}\\n{timestamp}"`` keyed by the
        secret key; the digest is returned base64 encoded.

        Args:
            timestamp: Unix timestamp in seconds

        Returns:
            Base64 encoded signature

        Raises:
            MissingCredentialError: If access ID or secret key is not set
        """
        if not self.access_id or not self.secret_key:
            raise MissingCredentialError(
                "Access ID and Secret Key required for signature authentication",
                context={"mode": self.mode},
            )

        string_to_sign = f"{self.access_id}\n{int(timestamp)}"
        digest = hmac.new(
            self.secret_key.encode("utf-8"),
            string_to_sign.encode("utf-8"),
            hashlib.sha1,
        ).digest()
        return base64.b64encode(digest).decode("ascii")

    def auth_headers(self) -> dict[str, str]:
        """Headers that authenticate an outbound request.

        Both modes send the raw credential as the V3 token header. The
        signature is available through compute_signature() but is not
        attached to requests.
        """
        return {TOKEN_HEADER: self.credential}
