import argparse
import getpass

from database import get_session_context, init_db
from services import UserService


def main(argv=None):
    parser = argparse.ArgumentParser(description="Media Gallery management commands")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="create database tables")

    admin = sub.add_parser("create-admin", help="create an admin account or promote an existing one")
    admin.add_argument("--email", type=str, required=True)
    admin.add_argument("--name", type=str, default="Admin")
    admin.add_argument("--password", type=str, default=None)

    args = parser.parse_args(argv)

    if args.command == "init-db":
        init_db()
        print("Database tables checked/created.")
        return 0

    password = args.password or getpass.getpass("Admin password: ")
    init_db()
    with get_session_context() as db:
        user = UserService.create_admin(db, args.name, args.email, password)
        print(f"Admin ready: {user.email} (id={user.id})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
