#!/usr/bin/env python3
"""
Database migration runner.

Connects directly to the Supabase PostgreSQL database and applies the SQL
files in migrations/ in name order, recording each one with a checksum.

Usage:
    python run_migrations.py              # Run pending migrations
    python run_migrations.py --status     # Show migration status
    python run_migrations.py --dry-run    # Show what would run

Configuration:
    Set DATABASE_URL in your .env file to the Postgres connection URI
    (Supabase Dashboard → Settings → Database → Connection string → URI).
"""

import argparse
import hashlib
import sys
from pathlib import Path
from typing import NamedTuple

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


class Migration(NamedTuple):
    name: str
    path: Path
    checksum: str


def checksum_of(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()[:16]


def discover_migrations(directory: Path = MIGRATIONS_DIR) -> list[Migration]:
    """All migration files, in the order they must be applied."""
    if not directory.exists():
        console.print(f"[yellow]Warning:[/yellow] Migrations directory not found: {directory}")
        return []
    return [
        Migration(path.name, path, checksum_of(path))
        for path in sorted(directory.glob("*.sql"))
    ]


def get_db_connection():
    """Get a connection to the PostgreSQL database."""
    settings = get_settings()

    if not settings.database_url:
        console.print("[red]Error:[/red] DATABASE_URL is not set.")
        sys.exit(1)

    try:
        return psycopg2.connect(settings.database_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn) -> None:
    """Create the migrations tracking table if it doesn't exist."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("""
                CREATE TABLE IF NOT EXISTS {} (
                    id SERIAL PRIMARY KEY,
                    name VARCHAR(255) NOT NULL UNIQUE,
                    checksum VARCHAR(64) NOT NULL,
                    applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                );
            """).format(sql.Identifier(MIGRATIONS_TABLE))
        )
    conn.commit()


def get_applied_migrations(conn) -> dict[str, dict]:
    """Get already applied migrations, keyed by file name."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {
            row[0]: {"checksum": row[1], "applied_at": row[2]}
            for row in cur.fetchall()
        }


def pending_migrations(available: list[Migration], applied: dict[str, dict]) -> list[Migration]:
    """
    Migrations not yet applied.

    Applied files whose content changed are reported, not re-run.
    """
    pending = []
    for migration in available:
        if migration.name not in applied:
            pending.append(migration)
        elif applied[migration.name]["checksum"] != migration.checksum:
            console.print(
                f"[yellow]Warning:[/yellow] Migration {migration.name} has changed since it was applied!"
            )
    return pending


def apply_migration(conn, migration: Migration, dry_run: bool = False) -> None:
    """Run one migration file and record it, in a single transaction."""
    if dry_run:
        console.print(f"[cyan]Would run:[/cyan] {migration.name}")
        return

    console.print(f"[blue]Running:[/blue] {migration.name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(migration.path.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (migration.name, migration.checksum),
            )
        conn.commit()
        console.print(f"[green]✓[/green] {migration.name} applied successfully")
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {migration.name} failed: {e}")
        raise


def show_status(applied: dict[str, dict], pending: list[Migration]) -> None:
    """Print a table of applied and pending migrations."""
    if not applied and not pending:
        console.print("[dim]No migrations found.[/dim]")
        return

    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Applied At")
    table.add_column("Checksum")

    for name, info in applied.items():
        applied_at = info["applied_at"]
        table.add_row(
            name,
            "[green]Applied[/green]",
            applied_at.strftime("%Y-%m-%d %H:%M:%S") if applied_at else "",
            info["checksum"],
        )
    for migration in pending:
        table.add_row(migration.name, "[yellow]Pending[/yellow]", "", migration.checksum)

    console.print(table)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run database migrations")
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show migration status without running anything",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what migrations would run without executing them",
    )
    args = parser.parse_args()

    console.print("[bold]Quill Database Migrations[/bold]")
    console.print()

    conn = get_db_connection()
    try:
        ensure_migrations_table(conn)
        applied = get_applied_migrations(conn)
        pending = pending_migrations(discover_migrations(), applied)

        if args.status:
            show_status(applied, pending)
            return

        if not pending:
            console.print("[green]All migrations are up to date![/green]")
            return

        console.print(f"Found {len(pending)} pending migration(s):")
        for migration in pending:
            console.print(f"  - {migration.name}")
        console.print()

        for migration in pending:
            apply_migration(conn, migration, dry_run=args.dry_run)

        if not args.dry_run:
            console.print()
            console.print("[green]All migrations completed successfully![/green]")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
