"""
Result reporting: log summary and GitHub Actions step outputs.
"""

import json
import os
from collections.abc import Sequence

from link_checker.core.checker import LinkResult
from link_checker.utils.log import ci_section, log

_HEREDOC_DELIMITER = "EOF"


def summarise(results: Sequence[LinkResult]) -> list[LinkResult]:
    """Broken links in *results*, in input order."""
    return [r for r in results if r.is_broken]


def log_report(results: Sequence[LinkResult]) -> list[LinkResult]:
    """Log totals and every broken link; return the broken ones."""
    broken = summarise(results)
    log.info("=== Link Check Results ===")
    log.info("Total links checked: %d", len(results))
    log.info("Broken links found: %d", len(broken))

    if not broken:
        log.info("[OK] No broken links found!")
        return broken

    with ci_section(f"Broken links ({len(broken)})"):
        for result in broken:
            log.error("[BROKEN] %s (Status: %d) - %s",
                      result.url, result.status_code, result.error or "")
    return broken


def set_output(name: str, value: str) -> None:
    """Append ``name=value`` to the file named by ``$GITHUB_OUTPUT``.

    Multi-line values use the ``name<<EOF`` form.  Nothing happens when the
    variable is unset.
    """
    path = os.environ.get("GITHUB_OUTPUT")
    if not path:
        return
    try:
        with open(path, "a", encoding="utf-8") as fh:
            if "\n" in value:
                fh.write(f"{name}<<{_HEREDOC_DELIMITER}\n{value}\n{_HEREDOC_DELIMITER}\n")
            else:
                fh.write(f"{name}={value}\n")
    except OSError as exc:
        log.warning("Failed to write GITHUB_OUTPUT file %s – %s", path, exc)


def write_github_outputs(results: Sequence[LinkResult]) -> None:
    broken = summarise(results)
    set_output("total-links-checked", str(len(results)))
    set_output("broken-links-count", str(len(broken)))
    set_output("broken-links", json.dumps([r.to_dict() for r in broken]))
