"""Authentication submodule – password encryption and login-page scraping."""

from anz_bank_client.auth.bootstrap import (
    BootstrapExtractor,
    LoginKeys,
    PatternBootstrapExtractor,
)
from anz_bank_client.auth.password import (
    convert_to_pem_format,
    encrypt_password,
)

__all__ = [
    "BootstrapExtractor",
    "LoginKeys",
    "PatternBootstrapExtractor",
    "convert_to_pem_format",
    "encrypt_password",
]
