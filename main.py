"""Run learncli straight from a source checkout.

    python -m main code
    python -m main docs -q "azure functions"

Puts `src/` on the import path so `cli.main` resolves without `pip install -e .`;
the installed console script `learncli` calls the same `run()`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
