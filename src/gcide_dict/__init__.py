"""
gcide_dict - Convert the CIDE dictionary sources to Dictionary Services XML.

This package provides tools for:
- Resolving entity markers and cosmetic artifacts in raw text (normalize)
- Transliterating romanized Greek (greek)
- Extracting entries and their aliases from paragraphs (extract)
- Rewriting entries into the output HTML vocabulary (postprocess)
- Assembling the XML document (assemble)
- Running the whole conversion (pipeline)
"""

from gcide_dict.normalize import (
    UnknownEntityLog,
    normalize_text,
    replace_entities,
    replace_various,
    resolve_entity,
    format_fraction,
)

from gcide_dict.greek import greek_to_utf8

from gcide_dict.extract import (
    PLACEHOLDER_ENTRY,
    ACCEPTED_SOURCE,
    extract_document,
    extract_paragraph,
    walk_paragraphs,
    load_document,
    find_source,
    accept_paragraph,
    take_headwords,
    trim_breaks,
    clean_inline,
    transliterate_greek,
    inner_html,
)

from gcide_dict.postprocess import (
    clean_text,
    merge_quotes,
    rename_tags,
    post_process_entry,
    post_process_dictionary,
)

from gcide_dict.assemble import (
    unique,
    build_index,
    build_entry,
    build_xml,
)

from gcide_dict.pipeline import (
    Settings,
    RunState,
    find_source_files,
    extract_files,
    finish_extraction,
    run,
    main,
)

__version__ = "0.1.0"
