"""Impact rule file parsing and first-match rule evaluation.

Rule file format, one rule per line::

    # comment
    ^src/main/(.*)\\.kt$ => src/test/$1Test.kt

Replacement templates accept ``$1``, ``${1}`` and ``${name}`` group
references; ``\\$`` is a literal dollar sign.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from sagit.core.errors import RuleLoadError
from sagit.core.logging import get_logger

log = get_logger(__name__)

RULE_SEPARATOR = "=>"
COMMENT_PREFIX = "#"

_TEMPLATE_TOKEN = re.compile(r"\\(.)|\$\{(\w+)\}|\$(\d+)", re.DOTALL)


@dataclass(frozen=True, slots=True)
class ImpactRule:
    """Compiled regex plus a Python-syntax replacement template."""

    pattern: re.Pattern[str]
    replacement: str

    def substitute(self, path: str) -> str:
        return self.pattern.sub(self.replacement, path)


@dataclass(frozen=True, slots=True)
class Matched:
    path: str


@dataclass(frozen=True, slots=True)
class NoMatch:
    pass


NO_MATCH = NoMatch()

RuleResult = Matched | NoMatch


def translate_template(template: str) -> str:
    """Rewrite ``$1`` / ``${1}`` / ``${name}`` references as ``\\g<...>``."""
    out: list[str] = []
    pos = 0
    for m in _TEMPLATE_TOKEN.finditer(template):
        out.append(template[pos : m.start()].replace("\\", "\\\\"))
        escaped, braced, numbered = m.groups()
        if escaped is not None:
            out.append(escaped.replace("\\", "\\\\"))
        else:
            out.append(f"\\g<{braced or numbered}>")
        pos = m.end()
    out.append(template[pos:].replace("\\", "\\\\"))
    return "".join(out)


def parse_rules(text: str) -> list[ImpactRule]:
    """Parse rule file text.

    Blank lines, comments and lines without ``=>`` are skipped.

    Raises:
        RuleLoadError: A pattern is not a valid regular expression, or the
            replacement references a group the pattern does not define.
    """
    rules: list[ImpactRule] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        pattern, sep, replacement = line.partition(RULE_SEPARATOR)
        if not sep:
            continue
        pattern = pattern.strip()
        try:
            compiled = re.compile(pattern)
            rule = ImpactRule(compiled, translate_template(replacement.strip()))
            _check_references(rule)
        except (re.error, IndexError) as e:
            raise RuleLoadError.bad_pattern(line_no, pattern, str(e)) from e
        rules.append(rule)
    return rules


def _check_references(rule: ImpactRule) -> None:
    for m in re.finditer(r"\\g<(\w+)>", rule.replacement):
        ref = m.group(1)
        if ref.isdigit():
            if int(ref) > rule.pattern.groups:
                raise IndexError(f"invalid group reference {ref}")
        elif ref not in rule.pattern.groupindex:
            raise IndexError(f"unknown group name '{ref}'")


def load_rules(path: Path) -> list[ImpactRule]:
    """Load rules from ``path``. Missing or malformed files yield no rules."""
    if not path.is_file():
        return []
    try:
        rules = parse_rules(path.read_text(encoding="utf-8"))
    except RuleLoadError as e:
        log.warning("impact_rules_ignored", path=str(path), **e.details)
        return []
    except (OSError, UnicodeDecodeError) as e:
        log.warning("impact_rules_unreadable", path=str(path), error=str(e))
        return []
    log.debug("impact_rules_loaded", path=str(path), count=len(rules))
    return rules


def apply_rules(path: str, rules: Sequence[ImpactRule]) -> RuleResult:
    """First rule whose substitution changes ``path`` wins."""
    for rule in rules:
        mapped = rule.substitute(path)
        if mapped != path:
            return Matched(mapped)
    return NO_MATCH
