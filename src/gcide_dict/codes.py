"""
Fixed code tables for the CIDE source files.

Entity markers in the corpus look like ``<NAME/`` and stand for a single
glyph. Names are resolved against ENTITIES first, then as a base letter
followed by an accent name (ACCENTS), then as a two-letter base followed by
a double accent (DOUBLE_ACCENTS).
"""

# Glyph constants
EN_DASH = "–"
EM_DASH = "—"
DOUBLE_BAR = "‖"
FRACTION_SLASH = "⁄"
FINAL_SIGMA = "ς"
RIGHT_APOSTROPHE = "’"
HYPHEN = "-"
PRIME = "′"
MODIFIER_ACUTE = "ˊ"

ENTITIES: dict[str, str] = {
    # Markup
    "br": "<br/>",
    "?": "?",
    # Latin letters
    "ae": "æ",
    "AE": "Æ",
    "oe": "œ",
    "OE": "Œ",
    "edh": "ð",
    "thorn": "þ",
    "yogh": "ȝ",
    "schwa": "ə",
    "eth": "ð",
    "th": "th",
    "aemac": "ǣ",
    "cced": "ç",
    "Cced": "Ç",
    "ccedil": "ç",
    # Symbols
    "hand": "☞",
    "sect": "§",
    "para": "¶",
    "pound": "£",
    "cent": "¢",
    "deg": "°",
    "min": "′",
    "sec": "″",
    "prime": "´",
    "bprime": "˝",
    "middot": "·",
    "root": "√",
    "divide": "÷",
    "times": "×",
    "sharp": "♯",
    "flat": "♭",
    "natural": "♮",
    "dagger": "†",
    "dag": "†",
    "Dagger": "‡",
    "ddag": "‡",
    "star": "*",
    "rarr": "→",
    "larr": "←",
    "infin": "∞",
    "asterism": "⁂",
    "mdash": EM_DASH,
    "ndash": EN_DASH,
    # Quotes
    "lsquo": "‘",
    "rsquo": "’",
    "ldquo": "“",
    "rdquo": "”",
    "laquo": "«",
    "raquo": "»",
    # Escaped markup characters
    "lt": "&lt;",
    "gt": "&gt;",
    "amp": "&amp;",
    # Greek letters used outside <grk> spans
    "alpha": "α",
    "beta": "β",
    "gamma": "γ",
    "delta": "δ",
    "epsilon": "ε",
    "zeta": "ζ",
    "eta": "η",
    "theta": "θ",
    "iota": "ι",
    "kappa": "κ",
    "lambda": "λ",
    "mu": "μ",
    "nu": "ν",
    "xi": "ξ",
    "omicron": "ο",
    "pi": "π",
    "rho": "ρ",
    "sigma": "σ",
    "sigmat": FINAL_SIGMA,
    "tau": "τ",
    "upsilon": "υ",
    "phi": "φ",
    "chi": "χ",
    "psi": "ψ",
    "omega": "ω",
    "digamma": "ϝ",
    "GAMMA": "Γ",
    "DELTA": "Δ",
    "THETA": "Θ",
    "LAMBDA": "Λ",
    "PI": "Π",
    "SIGMA": "Σ",
    "PHI": "Φ",
    "PSI": "Ψ",
    "OMEGA": "Ω",
}

# Combining marks placed after a single base letter, e.g. <eacute/ -> e + acute
ACCENTS: dict[str, str] = {
    "acute": "\u0301",
    "grave": "\u0300",
    "cir": "\u0302",
    "circ": "\u0302",
    "til": "\u0303",
    "mac": "\u0304",
    "cr": "\u0306",
    "dot": "\u0307",
    "um": "\u0308",
    "uml": "\u0308",
    "ring": "\u030a",
    "car": "\u030c",
    "sdot": "\u0323",
    "dd": "\u0324",
    "ced": "\u0327",
    "sm": "\u0331",
    "sl": "\u0304",
}

# Combining marks spanning a two-letter base, e.g. <oomac/ -> oo + double macron
DOUBLE_ACCENTS: dict[str, str] = {
    "mac": "\u035e",
    "cr": "\u035d",
    "til": "\u0360",
    "inv": "\u0361",
}

# Romanized Greek used inside <grk> spans. Keys are one to three characters:
# a base letter optionally preceded by a breathing mark (' smooth, " rough)
# and followed by an accent (` acute, ~ grave, ^ circumflex) or iota
# subscript (,).
GREEK: dict[str, str] = {
    # Plain letters
    "a": "α",
    "b": "β",
    "g": "γ",
    "d": "δ",
    "e": "ε",
    "z": "ζ",
    "h": "η",
    "q": "θ",
    "i": "ι",
    "k": "κ",
    "l": "λ",
    "m": "μ",
    "n": "ν",
    "x": "ξ",
    "o": "ο",
    "p": "π",
    "r": "ρ",
    "s": "σ",
    "t": "τ",
    "u": "υ",
    "y": "υ",
    "f": "φ",
    "ch": "χ",
    "ps": "ψ",
    "w": "ω",
    "A": "Α",
    "B": "Β",
    "G": "Γ",
    "D": "Δ",
    "E": "Ε",
    "Z": "Ζ",
    "H": "Η",
    "Q": "Θ",
    "I": "Ι",
    "K": "Κ",
    "L": "Λ",
    "M": "Μ",
    "N": "Ν",
    "X": "Ξ",
    "O": "Ο",
    "P": "Π",
    "R": "Ρ",
    "S": "Σ",
    "T": "Τ",
    "U": "Υ",
    "Y": "Υ",
    "F": "Φ",
    "Ch": "Χ",
    "CH": "Χ",
    "Ps": "Ψ",
    "PS": "Ψ",
    "W": "Ω",
    # Accents
    "a`": "ά",
    "a~": "ὰ",
    "a^": "ᾶ",
    "a,": "ᾳ",
    "e`": "έ",
    "e~": "ὲ",
    "h`": "ή",
    "h~": "ὴ",
    "h^": "ῆ",
    "h,": "ῃ",
    "i`": "ί",
    "i~": "ὶ",
    "i^": "ῖ",
    "i:": "ϊ",
    "o`": "ό",
    "o~": "ὸ",
    "u`": "ύ",
    "u~": "ὺ",
    "u^": "ῦ",
    "u:": "ϋ",
    "y`": "ύ",
    "y~": "ὺ",
    "y^": "ῦ",
    "w`": "ώ",
    "w~": "ὼ",
    "w^": "ῶ",
    "w,": "ῳ",
    "a^,": "ᾷ",
    "a`,": "ᾴ",
    "h^,": "ῇ",
    "h`,": "ῄ",
    "w^,": "ῷ",
    "w`,": "ῴ",
    "i:`": "ΐ",
    "u:`": "ΰ",
    # Smooth breathing
    "'a": "ἀ",
    "'e": "ἐ",
    "'h": "ἠ",
    "'i": "ἰ",
    "'o": "ὀ",
    "'u": "ὐ",
    "'y": "ὐ",
    "'w": "ὠ",
    "'r": "ῤ",
    "'A": "Ἀ",
    "'E": "Ἐ",
    "'H": "Ἠ",
    "'I": "Ἰ",
    "'O": "Ὀ",
    "'W": "Ὠ",
    "'a`": "ἄ",
    "'a~": "ἂ",
    "'a^": "ἆ",
    "'e`": "ἔ",
    "'e~": "ἒ",
    "'h`": "ἤ",
    "'h~": "ἢ",
    "'h^": "ἦ",
    "'i`": "ἴ",
    "'i~": "ἲ",
    "'i^": "ἶ",
    "'o`": "ὄ",
    "'o~": "ὂ",
    "'u`": "ὔ",
    "'u~": "ὒ",
    "'u^": "ὖ",
    "'y`": "ὔ",
    "'w`": "ὤ",
    "'w~": "ὢ",
    "'w^": "ὦ",
    # Rough breathing
    '"a': "ἁ",
    '"e': "ἑ",
    '"h': "ἡ",
    '"i': "ἱ",
    '"o': "ὁ",
    '"u': "ὑ",
    '"y': "ὑ",
    '"w': "ὡ",
    '"r': "ῥ",
    '"A': "Ἁ",
    '"E': "Ἑ",
    '"H': "Ἡ",
    '"I': "Ἱ",
    '"O': "Ὁ",
    '"U': "Ὑ",
    '"Y': "Ὑ",
    '"W': "Ὡ",
    '"R': "Ῥ",
    '"a`': "ἅ",
    '"a~': "ἃ",
    '"a^': "ἇ",
    '"e`': "ἕ",
    '"e~': "ἓ",
    '"h`': "ἥ",
    '"h~': "ἣ",
    '"h^': "ἧ",
    '"i`': "ἵ",
    '"i~': "ἳ",
    '"i^': "ἷ",
    '"o`': "ὅ",
    '"o~': "ὃ",
    '"u`': "ὕ",
    '"u~': "ὓ",
    '"u^': "ὗ",
    '"y`': "ὕ",
    '"w`': "ὥ",
    '"w~': "ὣ",
    '"w^': "ὧ",
}
