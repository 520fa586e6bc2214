"""Password encryption for the ANZ login form."""

import base64

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding

PEM_HEADER = "-----BEGIN PUBLIC KEY-----"
PEM_FOOTER = "-----END PUBLIC KEY-----"
PEM_LINE_LENGTH = 64


def convert_to_pem_format(key_str: str) -> str:
    """
    Wrap the bare base64 public key served by the login page in a PEM
    envelope: header line, 64-character body lines, footer line.

    Any whitespace inside *key_str* is discarded first.
    """
    key = "".join(key_str.split())
    if not key:
        raise ValueError("Encryption key is empty")
    lines = [key[i:i + PEM_LINE_LENGTH] for i in range(0, len(key), PEM_LINE_LENGTH)]
    return "\n".join([PEM_HEADER, *lines, PEM_FOOTER])


def encrypt_password(password: str, encryption_key: str) -> str:
    """
    Replicate the login page's client-side password encryption:

      1. Load *encryption_key* (base64 SubjectPublicKeyInfo) as an RSA key
      2. Encrypt the UTF-8 password with PKCS#1 v1.5 padding
      3. Base64 the ciphertext on a single line

    PKCS#1 v1.5 padding is randomised, so two calls never produce the same
    ciphertext.  Raises ValueError when the key cannot be loaded.
    """
    public_key = serialization.load_pem_public_key(
        convert_to_pem_format(encryption_key).encode("ascii")
    )
    ciphertext = public_key.encrypt(password.encode("utf-8"), padding.PKCS1v15())
    return base64.b64encode(ciphertext).decode("ascii")
