"""Command-line entry point."""

from __future__ import annotations

from collections.abc import Sequence

from certsmaker.config import VERSION
from certsmaker.flags import apply_flags
from certsmaker.generator import generate


def main(argv: Sequence[str] | None = None) -> int:
    """Read flags and environment, then issue the certificates."""
    print(f"[certs-maker] {VERSION}\n")
    config = apply_flags(argv)
    generate(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())