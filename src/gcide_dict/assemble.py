"""
Builds the Dictionary Services XML document.

One <d:entry> per dictionary key, with a <d:index> line for every distinct
alias and the entry's HTML wrapped in a <div>.
"""

import uuid
from typing import Callable, Iterable
from xml.sax.saxutils import quoteattr

from gcide_dict.extract import Dictionary, Index

XML_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<d:dictionary xmlns="http://www.w3.org/1999/xhtml" '
    'xmlns:d="http://www.apple.com/DTDs/DictionaryService-1.0.rng">\n'
)
XML_FOOTER = "</d:dictionary>"


def new_entry_id() -> str:
    """Opaque id for a <d:entry>. XML ids cannot start with a digit."""
    return "A" + uuid.uuid4().hex


def unique(values: Iterable[str]) -> list[str]:
    """Drop repeated values, keeping the first occurrence order."""
    return list(dict.fromkeys(values))


def build_index(aliases: Iterable[str]) -> str:
    """Render one <d:index> line per alias."""
    lines = []
    for alias in aliases:
        value = quoteattr(alias)
        lines.append(f"<d:index d:value={value} d:title={value}/>\n")
    return "".join(lines)


def build_entry(name: str, fragment: str, aliases: Iterable[str], entry_id: str) -> str:
    return (
        f"\n<d:entry id={quoteattr(entry_id)} d:title={quoteattr(name)}>\n"
        f"{build_index(aliases)}"
        f"<div>{fragment}</div>"
        "\n</d:entry>\n"
    )


def build_xml(
    dictionary: Dictionary,
    index: Index,
    id_factory: Callable[[], str] = new_entry_id,
) -> str:
    """
    Assemble the full XML document.

    Alias lists in index are deduplicated in place before rendering.
    """
    print("Building xml")
    parts = [XML_HEADER]

    for name, fragment in dictionary.items():
        index[name] = unique(index.get(name, []))
        parts.append(build_entry(name, fragment, index[name], id_factory()))

    parts.append(XML_FOOTER)
    return "".join(parts)
