"""
Main entry point for the anz_bank_client package.

Allows running the client as: python -m anz_bank_client
"""

from anz_bank_client.cli import main

if __name__ == "__main__":
    main()
