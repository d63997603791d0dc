"""
Extracts dictionary entries from normalized CIDE text.

A CIDE file is a flat run of <p> paragraphs. An <ent> tag in a paragraph
starts a new entry; every following paragraph is appended to that entry
until the next <ent>. Paragraphs can be restricted to a single source
edition through their <source> marker.
"""

import re
from itertools import chain
from typing import Iterable
from xml.sax.saxutils import escape

from lxml import etree
from lxml.etree import _Element as Element

from gcide_dict.codes import HYPHEN, MODIFIER_ACUTE, PRIME, RIGHT_APOSTROPHE
from gcide_dict.greek import greek_to_utf8

Dictionary = dict[str, str]
Index = dict[str, list[str]]

# Bucket for content seen before the first <ent>. Contains markup characters,
# so no entry tag text can collide with it.
PLACEHOLDER_ENTRY = "<no entry>"

ACCEPTED_SOURCE = "1913 Webster"

# Tags whose text gets typographic substitutions
INLINE_TAGS = ("hw", "wf", "pr")

INLINE_SUBSTITUTIONS = (
    ("*", HYPHEN),
    ('"', PRIME),
    ("`", MODIFIER_ACUTE),
    ("'", RIGHT_APOSTROPHE),
)

PROGRESS_EVERY = 1000

CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")
# Only the predefined XML entities and character references survive parsing;
# any other "&" is kept as literal text.
BARE_AMPERSAND_RE = re.compile(r"&(?!(?:amp|lt|gt|quot|apos|#\d+|#x[0-9a-fA-F]+);)")
# "<" that cannot open a tag or comment
STRAY_LT_RE = re.compile(r"<(?!/?[A-Za-z_]|!--)")
WHITESPACE_RE = re.compile(r"\s+")


# ============================================================================
# Tree helpers
# ============================================================================


def get_all_text(elem: Element) -> str:
    """Get all text content from element and children, without the tail."""
    return "".join(elem.itertext())


def append_text(elem: Element, text: str) -> None:
    """Append text at the end of elem's content."""
    if len(elem):
        last = elem[-1]
        last.tail = (last.tail or "") + text
    else:
        elem.text = (elem.text or "") + text


def set_text(elem: Element, text: str) -> None:
    """Replace all content of elem with plain text."""
    for child in list(elem):
        elem.remove(child)
    elem.text = text


def drop_element(elem: Element) -> None:
    """Remove elem from its parent, leaving its tail text in place."""
    parent = elem.getparent()
    if parent is None:
        return

    if elem.tail:
        previous = elem.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + elem.tail
        else:
            parent.text = (parent.text or "") + elem.tail

    parent.remove(elem)


def drop_preceding_node(elem: Element) -> None:
    """Remove the node right before elem: a text run if there is one, else an element."""
    previous = elem.getprevious()
    if previous is None:
        parent = elem.getparent()
        if parent is not None:
            parent.text = None
    elif previous.tail:
        previous.tail = None
    else:
        drop_element(previous)


def drop_following_node(elem: Element) -> None:
    """Remove the node right after elem: a text run if there is one, else an element."""
    if elem.tail:
        elem.tail = None
        return

    following = elem.getnext()
    if following is not None:
        drop_element(following)


def element_children(elem: Element) -> list[Element]:
    """Child elements, skipping comments and processing instructions."""
    return [child for child in elem if isinstance(child.tag, str)]


def inner_html(elem: Element) -> str:
    """Serialize the content of elem without its own tags."""
    parts = [escape(elem.text or "")]
    for child in elem:
        parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts)


def load_document(text: str) -> Element:
    """
    Parse normalized CIDE text into a tree under a synthetic <root>.

    The source is hand-edited SGML rather than XML, so a recovering parser
    is used. Ampersands that do not start a predefined entity and "<" that
    cannot start a tag are escaped, so both reach the tree as text. Whitespace
    runs are collapsed to single spaces.
    """
    text = CONTROL_CHARS_RE.sub("", text)
    text = BARE_AMPERSAND_RE.sub("&amp;", text)
    text = STRAY_LT_RE.sub("&lt;", text)
    text = WHITESPACE_RE.sub(" ", text)

    parser = etree.XMLParser(recover=True, huge_tree=True, resolve_entities=False)
    root = etree.fromstring(f"<root>{text}</root>".encode("utf-8"), parser=parser)

    if root is None:
        return etree.Element("root")
    return root


# ============================================================================
# Paragraph steps
# ============================================================================


def find_source(paragraph: Element) -> Element | None:
    """
    Find the source marker for a paragraph.

    Looks in the paragraph first, then in the following sibling paragraphs.
    Returns None if the document ends without one.
    """
    for candidate in chain([paragraph], paragraph.itersiblings("p")):
        marker = candidate.find(".//source")
        if marker is not None:
            return marker
    return None


def accept_paragraph(paragraph: Element, accepted_source: str) -> bool:
    """
    Check the paragraph's source against accepted_source.

    On acceptance the paragraph's own source markers are removed, together
    with the text or element right before and after the first one (the
    brackets around the marker). A marker borrowed from a later paragraph is
    left for that paragraph.
    """
    marker = find_source(paragraph)
    if marker is None or get_all_text(marker).strip() != accepted_source:
        return False

    own_markers = paragraph.findall(".//source")
    if own_markers:
        drop_preceding_node(own_markers[0])
        drop_following_node(own_markers[0])
        for own in own_markers:
            drop_element(own)

    return True


def take_headwords(paragraph: Element, current: str, dictionary: Dictionary, index: Index) -> str:
    """
    Collect <ent> tags of the paragraph and return the current entry name.

    The first <ent> names the entry; all of them are recorded as aliases.
    The tags are removed from the paragraph, each with a directly following
    <br/>.
    """
    entry_tags = paragraph.findall(".//ent")
    if not entry_tags:
        return current

    current = get_all_text(entry_tags[0]).strip()
    dictionary.setdefault(current, "")
    aliases = index.setdefault(current, [])

    for entry_tag in entry_tags:
        aliases.append(get_all_text(entry_tag).strip())

        following = entry_tag.getnext()
        if following is not None and following.tag == "br" and not (entry_tag.tail or "").strip():
            drop_element(following)

        drop_element(entry_tag)

    return current


def trim_breaks(paragraph: Element) -> None:
    """Drop a leading <br/>; replace a trailing <br/> with a space."""
    children = element_children(paragraph)

    if children and children[0].tag == "br" and not (paragraph.text or "").strip():
        drop_element(children.pop(0))

    if children and children[-1].tag == "br" and not (children[-1].tail or "").strip():
        last = children.pop()
        if children:
            append_text(children[-1], " ")
        drop_element(last)


def clean_inline(paragraph: Element) -> None:
    """Apply typographic substitutions to headword, word form and pronunciation tags."""
    for elem in list(paragraph.iter(*INLINE_TAGS)):
        text = get_all_text(elem)
        for old, new in INLINE_SUBSTITUTIONS:
            text = text.replace(old, new)
        set_text(elem, text)


def transliterate_greek(paragraph: Element) -> None:
    """Replace the content of each <grk> tag with Greek script."""
    for elem in list(paragraph.iter("grk")):
        set_text(elem, greek_to_utf8(get_all_text(elem)))


# ============================================================================
# Document walk
# ============================================================================


def extract_paragraph(
    paragraph: Element,
    current: str,
    dictionary: Dictionary,
    index: Index,
    accepted_source: str | None = ACCEPTED_SOURCE,
) -> str:
    """
    Process one paragraph and append it to the current entry.

    Returns the entry name that is current after this paragraph. A
    paragraph rejected by the source filter has no effect.
    """
    if accepted_source is not None and not accept_paragraph(paragraph, accepted_source):
        return current

    current = take_headwords(paragraph, current, dictionary, index)
    trim_breaks(paragraph)
    clean_inline(paragraph)
    transliterate_greek(paragraph)

    dictionary[current] = dictionary.get(current, "") + inner_html(paragraph)
    return current


def walk_paragraphs(
    paragraphs: Iterable[Element],
    dictionary: Dictionary,
    index: Index,
    accepted_source: str | None = ACCEPTED_SOURCE,
    current: str = PLACEHOLDER_ENTRY,
) -> str:
    """Fold extract_paragraph over paragraphs in order, threading the current entry name."""
    for count, paragraph in enumerate(paragraphs):
        current = extract_paragraph(paragraph, current, dictionary, index, accepted_source)

        if count % PROGRESS_EVERY == 0:
            print(f"Parsed {count} {current}")

    return current


def extract_document(
    text: str,
    dictionary: Dictionary,
    index: Index,
    accepted_source: str | None = ACCEPTED_SOURCE,
    current: str = PLACEHOLDER_ENTRY,
) -> str:
    """
    Add the entries of one normalized document to dictionary and index.

    Pass accepted_source=None to keep paragraphs from every source.
    Returns the entry that was current when the document ended.
    """
    root = load_document(text)
    paragraphs = list(root.iter("p"))
    return walk_paragraphs(paragraphs, dictionary, index, accepted_source, current)
