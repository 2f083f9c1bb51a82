"""Create an admin account (admins have no API endpoint).

Usage:
    python -m scripts.seed_admin <email> [password]
If password is omitted, a random one is printed.
"""

import asyncio
import secrets
import sys

from sqlalchemy.exc import IntegrityError

from ambassador_api.db import SessionLocal, init_models
from ambassador_api.security import hash_password
from ambassador_api.services import records


async def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.seed_admin <email> [password]", file=sys.stderr)
        sys.exit(1)
    email = sys.argv[1]
    password = sys.argv[2] if len(sys.argv) > 2 else secrets.token_urlsafe(12)

    await init_models()
    async with SessionLocal() as session:
        if await records.find_admin_by_email(session, email):
            print(f"Admin already exists: {email}", file=sys.stderr)
            sys.exit(1)
        try:
            admin = await records.insert_admin(session, email=email, password_hash=hash_password(password))
        except IntegrityError:
            print(f"Admin already exists: {email}", file=sys.stderr)
            sys.exit(1)
    print(f"Created admin: {admin.id} ({email})")
    if len(sys.argv) <= 2:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
