"""
Rewrites entity markers and cosmetic artifacts in raw CIDE text.

Runs on the raw text of a source file before any parsing. Entity markers
of the form ``<NAME/`` are replaced by their glyph; names that cannot be
resolved are kept visible as ``[NAME]`` and recorded in an
UnknownEntityLog so they can be reported once at the end of a run.
"""

import re
from pathlib import Path

from gcide_dict.codes import (
    ACCENTS,
    DOUBLE_ACCENTS,
    DOUBLE_BAR,
    EM_DASH,
    EN_DASH,
    ENTITIES,
    FRACTION_SLASH,
)

ENTITY_RE = re.compile(r"<([?\w]+?)/")
FRACTION_RE = re.compile(r"frac(\d+)x?(\d+)")

COMMENT_RES = (
    re.compile(r"<!--.*?-->", re.DOTALL),
    re.compile(r"<--.*?-->", re.DOTALL),
    # Unterminated comment openers
    re.compile(r"<!--"),
    re.compile(r"<--"),
)
EMPTY_PRONUNCIATION_RE = re.compile(r"\s*<pr>\((?:\?|�)\)</pr>")
TRAILING_SPACE_RE = re.compile(r"</(\w+?)>(\s+)")


class UnknownEntityLog:
    """Distinct entity names that could not be resolved.

    Each name is stored once together with the first source it appeared in.
    """

    def __init__(self) -> None:
        self._seen: dict[str, str] = {}

    def add(self, name: str, source: str = "") -> None:
        self._seen.setdefault(name, source)

    def names(self) -> list[str]:
        return sorted(self._seen)

    def source_of(self, name: str) -> str:
        return self._seen[name]

    def __contains__(self, name: object) -> bool:
        return name in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def report(self) -> str:
        """Generate a one-line summary of unknown entities."""
        if not self._seen:
            return "All entities resolved."
        return f"Unknown entities ({len(self._seen)}): {', '.join(self.names())}"

    def save_report(self, output_path: Path) -> None:
        """Save a markdown report listing each unknown entity and where it was found."""
        lines = ["# Unknown Entities Report", ""]

        if not self._seen:
            lines.append("All entities resolved - no unknown entity markers found.")
            output_path.write_text("\n".join(lines), encoding="utf-8")
            return

        for name in self.names():
            lines.append(f"### `<{name}/`")
            lines.append(f"**Source:** `{self._seen[name] or '-'}`")
            lines.append("")

        output_path.write_text("\n".join(lines), encoding="utf-8")


def format_fraction(numerator: str, denominator: str) -> str:
    """Render a fraction as superscript numerator, fraction slash, subscript denominator."""
    return f"<sup>{numerator}</sup>{FRACTION_SLASH}<sub>{denominator}</sub>"


def resolve_entity(name: str) -> str | None:
    """
    Resolve a single entity name, or return None when no table knows it.

    Lookup order: exact name, base letter + accent, two-letter base +
    double accent, then the fraction forms ``frac1x5000`` and ``frac34``.
    A name starting with ``frac`` always resolves, to itself when it holds
    no digit runs.
    """
    if name in ENTITIES:
        return ENTITIES[name]
    if name[1:] in ACCENTS:
        return name[:1] + ACCENTS[name[1:]]
    if name[2:] in DOUBLE_ACCENTS:
        return name[:2] + DOUBLE_ACCENTS[name[2:]]
    if name.startswith("frac"):
        # Fraction runs are rewritten in place; any other text in the name is kept
        return FRACTION_RE.sub(lambda m: format_fraction(m.group(1), m.group(2)), name)
    return None


def replace_entities(text: str, unknown: UnknownEntityLog, source: str = "") -> str:
    """Replace every ``<NAME/`` marker in text."""

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        glyph = resolve_entity(name)
        if glyph is None:
            unknown.add(name, source)
            return f"[{name}]"
        return glyph

    return ENTITY_RE.sub(substitute, text)


def replace_various(text: str) -> str:
    """Strip comments and fix dash, bar, pronunciation and whitespace artifacts."""
    for pattern in COMMENT_RES:
        text = pattern.sub("", text)

    # Long dashes
    text = text.replace("---", EM_DASH)
    text = text.replace("--", EN_DASH)

    # Double bar, plus its mojibake form
    text = text.replace("||", DOUBLE_BAR)
    text = text.replace("\\'d8", DOUBLE_BAR)

    text = EMPTY_PRONUNCIATION_RE.sub("", text)

    # Move whitespace after a closing tag inside it. Twice for one level of nesting.
    text = TRAILING_SPACE_RE.sub(r"\2</\1>", text)
    text = TRAILING_SPACE_RE.sub(r"\2</\1>", text)

    return text


def normalize_text(text: str, unknown: UnknownEntityLog, source: str = "") -> str:
    """Entity substitution followed by cosmetic cleanup."""
    text = replace_entities(text, unknown, source)
    return replace_various(text)
