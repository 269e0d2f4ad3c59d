"""
Mint an access token for an existing user, for local development.

Usage:
    python -m car_rental.scripts.create_token vendor@example.com --days 7
"""
import argparse
import sys
from datetime import timedelta

from car_rental.core.security import create_access_token
from car_rental.data_access import user_repo
from car_rental.db.session import SessionLocal


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a bearer token for a user email.")
    parser.add_argument("email", help="email of the user the token identifies")
    parser.add_argument("--days", type=int, default=1, help="token lifetime in days")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        if user_repo.get_by_email(db, email=args.email) is None:
            print(f"No user with email {args.email}", file=sys.stderr)
            return 1
    finally:
        db.close()

    print(create_access_token(args.email, expires_delta=timedelta(days=args.days)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
