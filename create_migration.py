"""
Script to create a new Alembic migration from the current models.
Run this with the database up (docker compose up -d).
"""
import subprocess
import sys


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    message = " ".join(args).strip() or "schema_change"

    print(f"Creating migration: {message}")
    print("=" * 60)

    result = subprocess.run(
        ["alembic", "revision", "--autogenerate", "-m", message],
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        print("Error creating migration:")
        print(result.stderr)
        return 1

    print(result.stdout)
    print("=" * 60)
    print("Migration created.")
    print("\nNext steps:")
    print("1. Review the generated migration in alembic/versions/")
    print("2. Run: alembic upgrade head")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
