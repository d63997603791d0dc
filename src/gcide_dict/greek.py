"""Transliterates the romanized Greek of <grk> spans into Greek script."""

from gcide_dict.codes import FINAL_SIGMA, GREEK

# Longest key in the GREEK table
MAX_FRAGMENT = 3


def match_fragment(text: str, pos: int) -> str | None:
    """Return the longest GREEK key starting at pos, trying lengths 3, 2, 1."""
    for length in range(MAX_FRAGMENT, 0, -1):
        fragment = text[pos:pos + length]
        if len(fragment) == length and fragment in GREEK:
            return fragment
    return None


def greek_to_utf8(text: str) -> str:
    """
    Decode romanized Greek with a greedy longest-match scan.

    Characters that start no known fragment are copied unchanged, so the
    result is never shorter than the untranslatable part of the input.
    A trailing ``s`` becomes final sigma.
    """
    result = []
    pos = 0

    while pos < len(text):
        fragment = match_fragment(text, pos)
        if fragment is None:
            result.append(text[pos])
            pos += 1
            continue

        if fragment == "s" and pos + 1 == len(text):
            result.append(FINAL_SIGMA)
        else:
            result.append(GREEK[fragment])
        pos += len(fragment)

    return "".join(result)
