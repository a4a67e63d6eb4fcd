# This script validates saved API responses against the contract models.
# Pass JSON files captured from the live API; each one is parsed and any contract failure is reported.
# A non-zero exit code means at least one sample no longer matches the contracts.
# ruff: noqa: E402

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.contracts.errors import ContractValidationError
from src.contracts.parsing import parse_rnm_response
from src.contracts.schemas import ResponseKind


def check_sample(path: Path, *, kind: ResponseKind | None) -> str | None:
    """Return a finding for `path`, or None when it parses cleanly."""

    try:
        parsed = parse_rnm_response(path.read_bytes(), kind=kind)
    except ContractValidationError as exc:
        return f"{path}: {exc}"
    if not parsed.is_valid:
        return f"{path}: {parsed.kind.value} record carries API error {parsed.error!r}"
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate saved Rick and Morty API responses.")
    parser.add_argument("paths", nargs="+", type=Path, help="JSON response files to check")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in ResponseKind],
        default=None,
        help="Response kind; detected from the payload shape when omitted",
    )
    args = parser.parse_args(argv)
    kind = ResponseKind(args.kind) if args.kind else None

    findings = [finding for path in args.paths if (finding := check_sample(path, kind=kind))]
    if findings:
        print("Contract check failed:")
        for item in findings:
            print(f"- {item}")
        return 1

    print(f"{len(args.paths)} response sample(s) match the contracts.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
