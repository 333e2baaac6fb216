#!/usr/bin/env python3
"""Run the test suite against a freshly migrated test database.

Sets ENV=test so both Alembic and the app use POSTGRES_DB_TEST, migrates
up, runs pytest, then migrates back down to an empty schema.
"""

from __future__ import annotations

import os
import subprocess
import sys


def _run(cmd: list[str], env: dict[str, str]) -> int:
    print("$ " + " ".join(cmd))
    return subprocess.run(cmd, env=env).returncode


def main(argv: list[str] | None = None) -> int:
    pytest_args = sys.argv[1:] if argv is None else argv
    env = dict(os.environ, ENV="test")

    code = _run(["alembic", "upgrade", "head"], env)
    if code != 0:
        return code
    try:
        code = _run([sys.executable, "-m", "pytest", *pytest_args], env)
    finally:
        reset_code = _run(["alembic", "downgrade", "base"], env)
    return code or reset_code


if __name__ == "__main__":
    raise SystemExit(main())
