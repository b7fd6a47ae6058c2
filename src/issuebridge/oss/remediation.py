"""Remediation advice for vulnerable dependencies."""

from __future__ import annotations

from issuebridge.oss.models import Vulnerability

_NPM_FAMILY = frozenset({"npm", "yarn", "yarn-workspace"})


def upgrade_message(vuln: Vulnerability) -> str:
    """``Upgrade to <pkg@version>`` from the first upgrade step, or ``""``."""
    if len(vuln.upgrade_path) > 1 and isinstance(vuln.upgrade_path[1], str):
        return f"Upgrade to {vuln.upgrade_path[1]}"
    return ""


def outdated_dependency_message(vuln: Vulnerability) -> str:
    advice = (
        "Your dependencies are out of date, otherwise you would be using a newer "
        f"{vuln.name} than {vuln.name}@{vuln.version}. "
    )
    if vuln.package_manager in _NPM_FAMILY:
        advice += (
            "Try relocking your lockfile or deleting node_modules and reinstalling"
            " your dependencies. If the problem persists, one of your dependencies"
            " may be bundling outdated modules."
        )
    else:
        advice += (
            "Try reinstalling your dependencies. If the problem persists, one of"
            " your dependencies may be bundling outdated modules."
        )
    return advice


def is_outdated(vuln: Vulnerability) -> bool:
    """True when the suggested upgrade is what is already installed."""
    return (
        len(vuln.upgrade_path) > 1
        and len(vuln.from_path) > 1
        and vuln.upgrade_path[1] == vuln.from_path[1]
    )


def remediation(vuln: Vulnerability) -> str:
    """Pick the remediation text for *vuln* (empty when nothing is fixable)."""
    if not (vuln.is_upgradable or vuln.is_patchable):
        return ""
    message = upgrade_message(vuln)
    if message and is_outdated(vuln) and not vuln.is_patchable:
        return outdated_dependency_message(vuln)
    return message
