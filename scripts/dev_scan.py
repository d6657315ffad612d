#!/usr/bin/env python3
"""Scan a local project with every applicable module and print the findings as JSON."""
import argparse
import json
import sys

from sastcore.core.containers import build_module_registry
from sastcore.core.logging import setup_logging
from sastcore.services.scan_service import ScanService


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("target")
    ap.add_argument("--module", action="append", dest="modules")
    args = ap.parse_args()

    setup_logging()
    registry = build_module_registry()
    outcome = ScanService(registry).scan(args.target, selected=args.modules)

    summary = outcome.results.summary()
    print(json.dumps({
        "ran": outcome.ran,
        "skipped": outcome.skipped,
        "summary": {"total": summary.total, "by_severity": summary.by_severity},
        "findings": outcome.results.to_dict(),
    }, indent=2))

    return 1 if outcome.unfinished else 0


if __name__ == "__main__":
    sys.exit(main())
