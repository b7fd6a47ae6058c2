"""SCA scan-result data models (one envelope per scanned manifest)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


@dataclass
class Vulnerability:
    """A single vulnerable-dependency finding."""

    id: str = ""
    title: str = ""
    severity: str = ""
    package_name: str = ""
    name: str = ""
    version: str = ""
    package_manager: str = ""
    cwe: List[str] = field(default_factory=list)
    cve: List[str] = field(default_factory=list)
    fixed_in: List[str] = field(default_factory=list)
    upgrade_path: List[Any] = field(default_factory=list)  # strings, or False for "no step"
    from_path: List[str] = field(default_factory=list)  # the 'from' dependency chain
    is_upgradable: bool = False
    is_patchable: bool = False
    is_ignored: bool = False
    line_number: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vulnerability":
        identifiers = data.get("identifiers")
        if not isinstance(identifiers, dict):
            identifiers = {}
        line = data.get("lineNumber")
        upgrade_path = data.get("upgradePath")
        return cls(
            id=str(data.get("id") or ""),
            title=str(data.get("title") or ""),
            severity=str(data.get("severity") or ""),
            package_name=str(data.get("packageName") or ""),
            name=str(data.get("name") or ""),
            version=str(data.get("version") or ""),
            package_manager=str(data.get("packageManager") or ""),
            cwe=_str_list(identifiers.get("CWE")),
            cve=_str_list(identifiers.get("CVE")),
            fixed_in=_str_list(data.get("fixedIn")),
            upgrade_path=upgrade_path if isinstance(upgrade_path, list) else [],
            from_path=_str_list(data.get("from")),
            is_upgradable=bool(data.get("isUpgradable", False)),
            is_patchable=bool(data.get("isPatchable", False)),
            is_ignored=bool(data.get("isIgnored", False)),
            line_number=line if isinstance(line, int) and not isinstance(line, bool) else 0,
        )


@dataclass
class ScanResult:
    """One SCA envelope: the findings for a single target file."""

    display_target_file: str = ""
    vulnerabilities: List[Vulnerability] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanResult":
        vulns = data.get("vulnerabilities")
        return cls(
            display_target_file=str(data.get("displayTargetFile") or ""),
            vulnerabilities=[
                Vulnerability.from_dict(v) for v in (vulns if isinstance(vulns, list) else [])
                if isinstance(v, dict)
            ],
        )
