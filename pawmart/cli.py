"""
Command-line entry point for PawMart.
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from .config import get_settings
from .db.session import create_tables, init_engine, session_scope
from .exceptions import PawMartError
from .schemas.user_profile import UserCreate
from .seed import seed_catalog
from .services.petshop_service import PetShopService
from .services.user_service import UserService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pawmart", description="PawMart pet marketplace")
    parser.add_argument("--database-url", help="Override the configured database URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", help="Bind host")
    serve.add_argument("--port", type=int, help="Bind port")

    subparsers.add_parser("init-db", help="Create database tables")
    subparsers.add_parser("seed", help="Load sample pets and products")

    create_user = subparsers.add_parser("create-user", help="Register a user and print its id")
    create_user.add_argument("--name", required=True, help="Display name")
    create_user.add_argument("--email", required=True, help="Email address")
    create_user.add_argument("--city", help="City")
    create_user.add_argument("--area", help="Area or neighbourhood")

    recommend = subparsers.add_parser("recommend", help="Print pets ranked for a user")
    recommend.add_argument("--user-id", required=True, help="User identifier")

    return parser


def print_recommendations(user_id: str) -> None:
    with session_scope() as session:
        result = PetShopService(session).get_recommended_pets(user_id)

    top_ids = {pet.id for pet in result.recommended_pets}
    print(f"\n{len(result.all_pets)} available pets for user {user_id}:\n")
    for rank, pet in enumerate(result.all_pets, start=1):
        marker = "*" if pet.id in top_ids else " "
        print(f"{marker} {rank:>3}. {pet.compatibility_score:6.1f}  {pet.name} ({pet.breed})")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command-line usage."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    if args.command == "serve":
        import uvicorn

        from .api.app import create_app

        init_engine(args.database_url)
        uvicorn.run(create_app(), host=args.host or settings.api_host, port=args.port or settings.api_port)
        return 0

    init_engine(args.database_url)
    create_tables()

    try:
        if args.command == "init-db":
            logger.info("Database tables created")
        elif args.command == "seed":
            with session_scope() as session:
                created = seed_catalog(session)
            print(f"Created {created['pets']} pets and {created['products']} products")
        elif args.command == "create-user":
            data = UserCreate(name=args.name, email=args.email, city=args.city, area=args.area)
            with session_scope() as session:
                user = UserService(session).create_user(data)
            print(user.id)
        elif args.command == "recommend":
            print_recommendations(args.user_id)
    except PawMartError as e:
        logger.error(e.message)
        return 1
    except ValidationError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
