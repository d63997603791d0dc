"""
Post-processes extracted entries into the output HTML vocabulary.

Runs once over the finished dictionary. Each entry is handled on its own:
punctuation touch-ups, quotation authors moved into their quotation, and
CIDE tag names mapped onto a small set of HTML tags. A renamed tag keeps
its CIDE name as a class.
"""

import re

from lxml import etree
from lxml.etree import _Element as Element

from gcide_dict.codes import EM_DASH, RIGHT_APOSTROPHE
from gcide_dict.extract import (
    Dictionary,
    append_text,
    drop_element,
    inner_html,
    load_document,
)

DASH_RUN_RE = re.compile(r"\s+-{2,3}\s+")

TAG_MAP = {
    "hw": "h2",
    "plain": "span",
    "xex": "i",
    "it": "i",
}

PASSTHROUGH_TAGS = frozenset({"br", "i", "b", "p", "sup", "sub", "a"})

DEFAULT_TAG = "div"

PROGRESS_EVERY = 1000


def clean_text(text: str) -> str:
    """Trim, and fix the first spaced dash run and the first apostrophe only."""
    text = text.strip()
    text = DASH_RUN_RE.sub(f" {EM_DASH} ", text, count=1)
    return text.replace("'", RIGHT_APOSTROPHE, 1)


def merge_quotes(root: Element) -> None:
    """Move a <qau> found in the sibling after a <q> into the <q>, then drop that sibling."""
    for quote in list(root.iter("q")):
        following = quote.getnext()
        if following is None:
            continue

        authors = following.findall(".//qau")
        if not authors:
            continue

        for author in authors:
            author.tail = None
            quote.append(author)
        drop_element(following)


def new_tag_name(tag: str) -> str:
    if tag in TAG_MAP:
        return TAG_MAP[tag]
    if tag in PASSTHROUGH_TAGS:
        return tag
    return DEFAULT_TAG


def add_class(elem: Element, cls: str) -> None:
    classes = elem.get("class", "").split()
    if cls not in classes:
        classes.append(cls)
    elem.set("class", " ".join(classes))


def rename_tags(elem: Element) -> Element:
    """
    Build a renamed copy of elem and its descendants.

    Comments and processing instructions are not copied; their tail text is.
    """
    tag = elem.tag
    renamed = etree.Element(new_tag_name(tag), dict(elem.attrib))
    if renamed.tag != tag:
        add_class(renamed, tag)

    renamed.text = elem.text
    renamed.tail = elem.tail

    for child in elem:
        if isinstance(child.tag, str):
            renamed.append(rename_tags(child))
        elif child.tail:
            append_text(renamed, child.tail)

    return renamed


def post_process_entry(fragment: str) -> str:
    """Run all post-processing steps on one entry fragment."""
    root = load_document(clean_text(fragment))
    merge_quotes(root)

    renamed = etree.Element(root.tag)
    renamed.text = root.text
    for child in root:
        if isinstance(child.tag, str):
            renamed.append(rename_tags(child))
        elif child.tail:
            append_text(renamed, child.tail)

    return inner_html(renamed)


def post_process_dictionary(dictionary: Dictionary, verbose: bool = False) -> None:
    """Replace every fragment in dictionary with its post-processed form."""
    print(f"Postprocessing {len(dictionary)} entries...")

    for count, (name, fragment) in enumerate(list(dictionary.items())):
        dictionary[name] = post_process_entry(fragment)

        if count % PROGRESS_EVERY == 0 or verbose:
            print(f"Postprocessing entry {count} {name}")
