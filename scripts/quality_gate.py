"""Run lint, format, type and test checks and report results as JSON.

Usage:
    python scripts/quality_gate.py              # run all, JSON output
    python scripts/quality_gate.py --skip-tests # skip pytest (fast)
    python scripts/quality_gate.py --fix        # auto-fix ruff issues first
"""

from __future__ import annotations

import argparse
import json
import re
import subprocess
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

MYPY_TARGETS = [
    "chestmeta/_utils.py",
    "chestmeta/client.py",
    "chestmeta/codec.py",
    "chestmeta/commands.py",
    "chestmeta/exceptions.py",
    "chestmeta/formatters/",
    "chestmeta/models.py",
    "chestmeta/tags.py",
    "chestmeta/types.py",
]


def _run(cmd: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(cmd, capture_output=True, text=True, cwd=str(ROOT), timeout=300)


def _count(pattern: str, text: str) -> int:
    return sum(1 for line in text.splitlines() if re.search(pattern, line))


def _check(cmd: list[str], count_key: str, pattern: str, use_stderr: bool = False) -> dict:
    t0 = time.monotonic()
    r = _run(cmd)
    text = (r.stderr + r.stdout) if use_stderr else r.stdout
    result: dict = {
        "status": "pass" if r.returncode == 0 else "fail",
        count_key: 0 if r.returncode == 0 else _count(pattern, text),
        "duration_s": round(time.monotonic() - t0, 1),
    }
    if r.returncode != 0:
        result["output"] = text.strip()[-2000:]
    return result


def check_pytest() -> dict:
    t0 = time.monotonic()
    r = _run([sys.executable, "-m", "pytest", "tests/", "-q", "--no-header", "--tb=short"])
    passed = failed = 0
    # Summary line: "120 passed" or "3 failed, 117 passed"
    for line in reversed(r.stdout.strip().splitlines()):
        m_passed = re.search(r"(\d+)\s+passed", line)
        m_failed = re.search(r"(\d+)\s+failed", line)
        if m_passed:
            passed = int(m_passed.group(1))
        if m_failed:
            failed = int(m_failed.group(1))
        if m_passed or m_failed:
            break
    result: dict = {
        "status": "pass" if r.returncode == 0 else "fail",
        "passed": passed,
        "failed": failed,
        "duration_s": round(time.monotonic() - t0, 1),
    }
    if r.returncode != 0:
        result["output"] = r.stdout.strip()[-2000:]
    return result


def main() -> None:
    parser = argparse.ArgumentParser(description="Run all quality checks")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pytest")
    parser.add_argument("--fix", action="store_true", help="Auto-fix ruff issues first")
    args = parser.parse_args()

    t0 = time.monotonic()
    py = sys.executable
    if args.fix:
        _run([py, "-m", "ruff", "check", "--fix", "."])

    checks: dict[str, dict] = {}
    print("Running ruff lint...", file=sys.stderr)
    checks["ruff_lint"] = _check([py, "-m", "ruff", "check", "."], "errors", r"^\S+:\d+:\d+:")
    print("Running ruff format...", file=sys.stderr)
    checks["ruff_format"] = _check(
        [py, "-m", "ruff", "format", "--check", "."],
        "files_to_reformat",
        r"^Would reformat",
        use_stderr=True,
    )
    print("Running mypy...", file=sys.stderr)
    checks["mypy"] = _check([py, "-m", "mypy", *MYPY_TARGETS], "errors", r": error:")
    if args.skip_tests:
        checks["pytest"] = {"status": "skip", "reason": "--skip-tests"}
    else:
        print("Running pytest...", file=sys.stderr)
        checks["pytest"] = check_pytest()

    statuses = [c["status"] for c in checks.values()]
    overall = "pass" if all(s in ("pass", "skip") for s in statuses) else "fail"
    print(
        json.dumps(
            {
                "overall": overall,
                "checks": checks,
                "total_duration_s": round(time.monotonic() - t0, 1),
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
