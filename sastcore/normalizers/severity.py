from __future__ import annotations

import logging

from sastcore.domain.models import Severity

logger = logging.getLogger(__name__)

_FIND_SEC_BUGS_PRIORITIES: dict[int, Severity] = {
    1: "high",
    2: "medium",
    3: "low",
}

_BANDIT_SEVERITIES: dict[str, Severity] = {
    "HIGH": "high",
    "MEDIUM": "medium",
    "LOW": "low",
}


def classify_find_sec_bugs(priority: int | str | None) -> Severity:
    # Unknown priorities are kept as low rather than dropped
    try:
        sev = _FIND_SEC_BUGS_PRIORITIES.get(int(str(priority).strip()))
    except ValueError:
        sev = None
    if sev is None:
        logger.debug("Unknown FindSecBugs priority %r, classifying as low", priority)
        return "low"
    return sev


def classify_bandit(issue_severity: str | None) -> Severity:
    sev = _BANDIT_SEVERITIES.get((issue_severity or "").strip().upper())
    if sev is None:
        logger.debug("Unknown Bandit severity %r, classifying as low", issue_severity)
        return "low"
    return sev
