"""
Redirect token encoding for outbound job links.

Job URLs are encrypted with AES-256-CBC (PKCS7 padding) and rendered as
unpadded URL-safe base64, so notifications can link to /redirect/<token>
without exposing the source URL.

The IV is fixed per process and not carried in the token: the same URL always
produces the same token. Redirect lookups and deduplication rely on that, but
it also means tokens leak URL equality. A hardened variant would draw a random
IV per token and prepend it to the ciphertext.
"""

import re
from typing import Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from itsdangerous import BadData
from itsdangerous.encoding import base64_decode, base64_encode

KEY_SIZE = 32
IV_SIZE = 16

_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class LinkCodec:
    """Symmetric encode/decode of job URLs into redirect tokens."""

    def __init__(self, key: bytes, iv: bytes):
        if len(key) != KEY_SIZE:
            raise ValueError(f"Encryption key must be {KEY_SIZE} bytes, got {len(key)}")
        if len(iv) != IV_SIZE:
            raise ValueError(f"Encryption IV must be {IV_SIZE} bytes, got {len(iv)}")
        self._key = key
        self._iv = iv

    @classmethod
    def from_settings(cls, settings) -> "LinkCodec":
        """Build a codec from DispatchSettings key material."""
        return cls(
            settings.url_encryption_key.encode("utf-8"),
            settings.url_encryption_iv.encode("utf-8"),
        )

    def _cipher(self) -> Cipher:
        return Cipher(algorithms.AES(self._key), modes.CBC(self._iv))

    def encode(self, url: str) -> Optional[str]:
        """
        Encrypt a URL into a URL-safe redirect token.

        Never raises - returns None if the URL cannot be encoded.

        Args:
            url: Destination URL

        Returns:
            Token using the alphabet A-Z a-z 0-9 - _, or None on failure
        """
        if not isinstance(url, str):
            return None
        try:
            padder = padding.PKCS7(algorithms.AES.block_size).padder()
            padded = padder.update(url.encode("utf-8")) + padder.finalize()

            encryptor = self._cipher().encryptor()
            ciphertext = encryptor.update(padded) + encryptor.finalize()
        except (ValueError, TypeError) as e:
            print(f"  ⚠ Could not encode job URL: {e}")
            return None

        return base64_encode(ciphertext).decode("ascii")

    def decode(self, token: str) -> Optional[str]:
        """
        Decrypt a redirect token back to its URL.

        Never raises - returns None for any malformed, truncated or tampered
        token (bad alphabet, bad base64 length, ciphertext not block aligned,
        bad padding, non UTF-8 plaintext).

        Examples:
            >>> codec = LinkCodec(b"k" * 32, b"i" * 16)
            >>> codec.decode(codec.encode("https://example.com/job/1"))
            'https://example.com/job/1'

            >>> print(codec.decode("not+a/token"))
            None
        """
        if not isinstance(token, str) or not _TOKEN_PATTERN.match(token):
            return None
        try:
            ciphertext = base64_decode(token)

            decryptor = self._cipher().decryptor()
            padded = decryptor.update(ciphertext) + decryptor.finalize()

            unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
            plaintext = unpadder.update(padded) + unpadder.finalize()

            return plaintext.decode("utf-8")
        except (BadData, ValueError, TypeError):
            # Bad base64, unaligned ciphertext, bad padding or invalid UTF-8
            return None
