"""
Create the database schema and register a user account.

    python init_account.py +233111 secret1
"""
import argparse
import asyncio

from wallet_service.infrastructure.database import get_session_factory, init_db
from wallet_service.modules.accounts import AuthService


async def create_account(phone_number: str, password: str) -> int:
    """Register ``phone_number``; returns the resulting status code."""
    await init_db()

    async with get_session_factory()() as db:
        service = AuthService.with_session(db)
        result = await service.register_user(phone_number, password)
        await db.commit()

    if result.ok:
        print(f"Account created: {phone_number} (id {result.data.id})")
    else:
        print(f"Account not created: {result.message}")
    return int(result.status_code)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register a wallet service user")
    parser.add_argument("phone_number")
    parser.add_argument("password")
    args = parser.parse_args(argv)
    status_code = asyncio.run(create_account(args.phone_number, args.password))
    return 0 if status_code < 400 else 1


if __name__ == "__main__":
    raise SystemExit(main())
