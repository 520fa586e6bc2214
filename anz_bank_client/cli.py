"""
Command-line interface for the ANZ internet-banking client.

Credentials are read from ANZ_USERNAME / ANZ_PASSWORD (a ``.env`` file in
the working directory is honoured) or prompted for.
"""

import argparse
import json
import os
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from anz_bank_client.client import Session
from anz_bank_client.config import PASSWORD_ENV, SESSION_FILE_ENV, USERNAME_ENV
from anz_bank_client.errors import AnzBankClientError
from anz_bank_client.logging_setup import log, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="anz-bank-client",
        description="List ANZ internet-banking accounts and transactions as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Credentials can be provided via the {USERNAME_ENV} and "
            f"{PASSWORD_ENV} env vars (or a .env file).\n"
            "If the password is not supplied, you will be prompted for it."
        ),
    )
    parser.add_argument(
        "--user", default=None,
        help=f"Internet-banking customer number (default: ${USERNAME_ENV})",
    )
    parser.add_argument(
        "--session-file", default=None,
        help="Resume the session stored in this file when it exists, "
             f"and save the session back to it afterwards (default: ${SESSION_FILE_ENV})",
    )
    parser.add_argument(
        "--logout", action="store_true",
        help="Log out once the command has finished",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("accounts", help="List viewable accounts")
    tx = sub.add_parser("transactions", help="List transactions for an account")
    tx.add_argument("account_no", help="Account number, e.g. 01-1234-1234567-00")
    tx.add_argument("--from", dest="start_date", required=True,
                    help="Start date (YYYY-MM-DD)")
    tx.add_argument("--to", dest="end_date", required=True,
                    help="End date (YYYY-MM-DD)")
    return parser.parse_args(argv)


def _open_session(session: Session, args: argparse.Namespace) -> None:
    session_file = Path(args.session_file) if args.session_file else None
    if session_file and session_file.exists():
        log.info("Resuming session from %s", session_file)
        session.load(session_file.read_text(encoding="utf-8"))
        return

    username = args.user or os.environ.get(USERNAME_ENV, "")
    password = os.environ.get(PASSWORD_ENV, "")
    if not username:
        raise SystemExit(f"No username given (use --user or set {USERNAME_ENV})")
    if not password:
        import getpass
        password = getpass.getpass("ANZ password: ")
    session.login(username, password)


def run(args: argparse.Namespace) -> int:
    with Session(logger=log) as session:
        _open_session(session, args)
        if args.command == "accounts":
            records = [a.as_dict() for a in session.list_accounts()]
        else:
            records = [
                t.as_dict()
                for t in session.list_transactions(
                    args.account_no, args.start_date, args.end_date
                )
            ]
        json.dump(records, sys.stdout, indent=2)
        sys.stdout.write("\n")

        if args.session_file:
            Path(args.session_file).write_text(session.export(), encoding="utf-8")
            log.debug("Session saved to %s", args.session_file)
        if args.logout:
            session.logout()
    return 0


def main(argv: list[str] | None = None) -> None:
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)
    if not args.session_file:
        args.session_file = os.environ.get(SESSION_FILE_ENV) or None

    setup_logging(debug=args.debug)

    try:
        sys.exit(run(args))
    except AnzBankClientError as exc:
        log.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
