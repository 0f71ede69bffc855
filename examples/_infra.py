from __future__ import annotations

import sys
from pathlib import Path

from returns.result import Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from algebra import lift as L  # noqa: E402


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def show(label: str, result: Result[object, object]) -> None:  # pragma: no cover (examples only)
    err = L.down.error_of(result)
    if err is None:
        print(f"  {label}: Success({L.down.to_optional(result)!r})")
    else:
        print(f"  {label}: Failure({err!r})")
