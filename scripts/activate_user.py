#!/usr/bin/env python3
"""
Career Portfolio - User Activation CLI

Activate or deactivate a user account through the admin API. Requires a
session token belonging to an admin (run `career-portfolio login` first).

Usage:
    python scripts/activate_user.py user@email.com                # activate
    python scripts/activate_user.py user@email.com --deactivate   # deactivate
"""
import asyncio
import sys

from career_portfolio.api import ApiError
from career_portfolio.main import CareerPortfolioApp, configure_logging


async def set_active(email: str, deactivate: bool = False) -> int:
    async with CareerPortfolioApp(current_path="/admin") as app:
        try:
            users = await app.admin.users(search=email)
            user = next((u for u in users if u.email == email), None)
            if not user:
                print(f"Error: No user found with email '{email}'")
                return 1

            if deactivate:
                if not user.is_active:
                    print(f"{email} is already inactive.")
                    return 0
                await app.admin.deactivate_user(user.id)
                print(f"Deactivated {email}.")
            else:
                if user.is_active:
                    print(f"{email} is already active.")
                    return 0
                await app.admin.activate_user(user.id)
                print(f"Activated {email}.")
        except ApiError as e:
            print(f"Error: {e}")
            return 1
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2 or len(sys.argv) > 3:
        print("Usage: python scripts/activate_user.py <email> [--deactivate]")
        print("Examples:")
        print("  python scripts/activate_user.py user@example.com                # activate")
        print("  python scripts/activate_user.py user@example.com --deactivate   # deactivate")
        sys.exit(1)

    configure_logging()
    deactivate = "--deactivate" in sys.argv
    email = sys.argv[1]
    sys.exit(asyncio.run(set_active(email, deactivate=deactivate)))
