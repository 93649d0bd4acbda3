"""Input: vocabulary sources for the worksheet."""

from worksheet.input.vocab import (
    STATIC_VOCABULARY,
    get_static_vocabulary,
    load_vocab_csv,
    to_traditional,
)
from worksheet.input.translation import (
    build_prompt,
    parse_tagged_reply,
    translate_phrase,
)

__all__ = [
    # vocab
    "STATIC_VOCABULARY",
    "get_static_vocabulary",
    "load_vocab_csv",
    "to_traditional",
    # translation
    "build_prompt",
    "parse_tagged_reply",
    "translate_phrase",
]
