"""Typed view of the SARIF 2.1.0 subset the converter reads.

Every optional SARIF property is an explicit field with a zero value
(``0``, ``""``, empty list) when absent or of the wrong JSON type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _text(value: Any) -> str:
    """Read ``{"text": ...}`` message/description objects."""
    return _str(_dict(value).get("text"))


@dataclass
class Region:
    start_line: int = 0
    start_column: int = 0
    end_line: int = 0
    end_column: int = 0
    snippet: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Region":
        d = _dict(data)
        return cls(
            start_line=_int(d.get("startLine")),
            start_column=_int(d.get("startColumn")),
            end_line=_int(d.get("endLine")),
            end_column=_int(d.get("endColumn")),
            snippet=_text(d.get("snippet")),
        )


@dataclass
class PhysicalLocation:
    uri: str = ""
    region: Region = field(default_factory=Region)

    @classmethod
    def from_dict(cls, data: Any) -> "PhysicalLocation":
        d = _dict(data)
        return cls(
            uri=_str(_dict(d.get("artifactLocation")).get("uri")),
            region=Region.from_dict(d.get("region")),
        )


@dataclass
class Location:
    physical_location: PhysicalLocation = field(default_factory=PhysicalLocation)

    @classmethod
    def from_dict(cls, data: Any) -> "Location":
        return cls(physical_location=PhysicalLocation.from_dict(_dict(data).get("physicalLocation")))


@dataclass
class ThreadFlow:
    locations: List[Location] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ThreadFlow":
        # threadFlowLocation wraps the actual location one level down
        return cls(locations=[
            Location.from_dict(_dict(tfl).get("location"))
            for tfl in _list(_dict(data).get("locations"))
        ])


@dataclass
class CodeFlow:
    thread_flows: List[ThreadFlow] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "CodeFlow":
        return cls(thread_flows=[ThreadFlow.from_dict(t) for t in _list(_dict(data).get("threadFlows"))])


@dataclass
class Suppression:
    status: str = ""  # "" means the producer left it out
    justification: str = ""
    category: str = ""
    expiration: Optional[str] = None
    ignored_on: str = ""
    ignored_by: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Suppression":
        d = _dict(data)
        props = _dict(d.get("properties"))
        expiration = props.get("expiration")
        return cls(
            status=_str(d.get("status")),
            justification=_str(d.get("justification")),
            category=_str(props.get("category")),
            expiration=expiration if isinstance(expiration, str) else None,
            ignored_on=_str(props.get("ignoredOn")),
            ignored_by=_str(_dict(props.get("ignoredBy")).get("name")),
        )


@dataclass
class Result:
    rule_id: str = ""
    level: str = ""
    message: str = ""
    locations: List[Location] = field(default_factory=list)
    code_flows: List[CodeFlow] = field(default_factory=list)
    suppressions: List[Suppression] = field(default_factory=list)
    fingerprints: Dict[str, str] = field(default_factory=dict)

    @property
    def primary_fingerprint(self) -> str:
        return self.fingerprints.get("1", "")

    @classmethod
    def from_dict(cls, data: Any) -> "Result":
        d = _dict(data)
        return cls(
            rule_id=_str(d.get("ruleId")),
            level=_str(d.get("level")),
            message=_text(d.get("message")),
            locations=[Location.from_dict(loc) for loc in _list(d.get("locations"))],
            code_flows=[CodeFlow.from_dict(cf) for cf in _list(d.get("codeFlows"))],
            suppressions=[Suppression.from_dict(s) for s in _list(d.get("suppressions"))],
            fingerprints={
                k: v for k, v in _dict(d.get("fingerprints")).items() if isinstance(v, str)
            },
        )


@dataclass
class Rule:
    id: str = ""
    short_description: str = ""
    default_level: str = ""
    categories: List[str] = field(default_factory=list)
    cwe: List[str] = field(default_factory=list)

    @property
    def is_security(self) -> bool:
        return any(c.lower() == "security" for c in self.categories)

    @classmethod
    def from_dict(cls, data: Any) -> "Rule":
        d = _dict(data)
        props = _dict(d.get("properties"))
        return cls(
            id=_str(d.get("id")),
            short_description=_text(d.get("shortDescription")),
            default_level=_str(_dict(d.get("defaultConfiguration")).get("level")),
            categories=[c for c in _list(props.get("categories")) if isinstance(c, str)],
            cwe=[c for c in _list(props.get("cwe")) if isinstance(c, str)],
        )


@dataclass
class Run:
    tool_name: str = ""
    rules: List[Rule] = field(default_factory=list)
    results: List[Result] = field(default_factory=list)

    def get_rule(self, rule_id: str) -> Rule:
        """Linear lookup by id; an empty Rule when absent."""
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        return Rule()

    @classmethod
    def from_dict(cls, data: Any) -> "Run":
        d = _dict(data)
        driver = _dict(_dict(d.get("tool")).get("driver"))
        return cls(
            tool_name=_str(driver.get("name")),
            rules=[Rule.from_dict(r) for r in _list(driver.get("rules"))],
            results=[Result.from_dict(r) for r in _list(d.get("results"))],
        )


@dataclass
class SarifLog:
    runs: List[Run] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "SarifLog":
        d = _dict(data)
        return cls(runs=[Run.from_dict(r) for r in _list(d.get("runs"))])
