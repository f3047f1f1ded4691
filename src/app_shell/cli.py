import argparse
import logging
import sys
from pathlib import Path

from src.adapters.sqlite.migrator import apply_migrations
from src.adapters.sqlite.repos import SQLiteInvoiceRepo
from src.api.deps import Settings
from src.app_shell.config import validate_ops_rules
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def handle_migrate(settings: Settings, args: argparse.Namespace) -> None:
    if not Path(settings.rules_path).exists():
        logger.error("Rules file %s not found.", settings.rules_path)
        sys.exit(1)

    rules = load_rules(Path(settings.rules_path))
    validate_ops_rules(rules, settings.data_dir)
    applied = apply_migrations(settings.db_path, args.migrations_dir)
    print(f"Applied {len(applied)} migrations.")


def handle_list(settings: Settings, args: argparse.Namespace) -> None:
    if not Path(settings.db_path).exists():
        logger.error("Database %s not found. Run 'migrate' first.", settings.db_path)
        sys.exit(1)

    invoices = SQLiteInvoiceRepo(settings.db_path).list_all()
    for inv in invoices:
        print(f"{inv.id}  {inv.date.isoformat()}  {inv.customer_id:<20} {inv.amount / 100:>12.2f}  {inv.status}")
    print(f"{len(invoices)} invoices.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Invoice Actions CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    migrate_parser = subparsers.add_parser("migrate", help="Apply pending database migrations")
    migrate_parser.add_argument(
        "--migrations-dir", default="migrations", help="Directory holding *.sql migrations"
    )

    subparsers.add_parser("list", help="Print all invoices")

    args = parser.parse_args()
    settings = Settings()

    if args.command == "migrate":
        handle_migrate(settings, args)
    elif args.command == "list":
        handle_list(settings, args)


if __name__ == "__main__":
    main()
