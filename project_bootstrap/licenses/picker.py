from __future__ import annotations

import logging

from project_bootstrap.errors import NoMatchError
from project_bootstrap.github.client import LicenseSummary
from project_bootstrap.select import Selector

logger = logging.getLogger(__name__)

APACHE_2_0 = "apache-2.0"

PROMPT = "Which license do you want to use?"


def match_licenses(licenses: list[LicenseSummary], query: str) -> list[LicenseSummary]:
    q = (query or "").strip().lower()
    return [lic for lic in licenses if q in lic.key.lower()]


def pick_license(
    matches: list[LicenseSummary],
    query: str,
    selector: Selector,
) -> LicenseSummary:
    if not matches:
        raise NoMatchError("license", query)
    if len(matches) == 1:
        return matches[0]

    q = (query or "").strip().lower()
    for lic in matches:
        if lic.key.lower() == q:
            logger.info("exact license match %s", lic.key)
            return lic

    idx = selector.choose(PROMPT, [lic.spdx_id for lic in matches])
    return matches[idx]


def needs_notice(key: str) -> bool:
    return (key or "").strip().lower() == APACHE_2_0
