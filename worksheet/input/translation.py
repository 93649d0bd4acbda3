"""AI translation of one English phrase into a worksheet entry."""

from typing import Dict, List, Optional

from worksheet.common.errors import TranslationParseError
from worksheet.common.logging import log_verbose
from worksheet.common.openai import OpenRouterClient
from worksheet.common.utils import split_characters
from worksheet.schema.base import Entry


TAGS = ("English", "Pinyin", "Chinese")

PROMPT_TEMPLATE = (
    "Translate the following English text to Chinese (Simplified) and Pinyin.\n"
    "Format the response exactly like this example:\n"
    "English: hello\n"
    "Pinyin: nǐ hǎo\n"
    "Chinese: 你好\n"
    "\n"
    "English: {phrase}"
)


def build_prompt(phrase: str) -> str:
    return PROMPT_TEMPLATE.format(phrase=phrase)


def parse_tagged_reply(text: str) -> Entry:
    """Parse a three-line 'English:/Pinyin:/Chinese:' reply into an Entry.

    Tags match case-insensitively after stripping the line; untagged lines
    are ignored and a repeated tag keeps its last value (models often echo
    the example first). Raises TranslationParseError if any tag is missing
    or empty.
    """
    found: Dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        for tag in TAGS:
            prefix = tag + ":"
            if line[:len(prefix)].lower() == prefix.lower():
                found[tag] = line[len(prefix):].strip()
                break

    missing: List[str] = [tag for tag in TAGS if not found.get(tag)]
    if missing:
        raise TranslationParseError(f"Reply is missing {', '.join(missing)}: {text!r}")

    pinyin = found["Pinyin"].split()
    chinese = split_characters(found["Chinese"])
    if not chinese:
        raise TranslationParseError(f"Reply has no Chinese characters: {text!r}")
    return Entry.create(found["English"], pinyin, chinese)


def translate_phrase(
    phrase: str,
    client: Optional[OpenRouterClient] = None,
    timeout: Optional[float] = None,
    verbose: bool = False,
) -> Entry:
    """Translate one English phrase via the chat-completion endpoint.

    Raises ValueError for a blank phrase, ConfigurationError if no API key
    is configured, and a TranslationError subclass for request, empty
    reply or parse failures.
    """
    phrase = phrase.strip()
    if not phrase:
        raise ValueError("phrase must not be empty")
    if client is None:
        client = OpenRouterClient()
    log_verbose(verbose, "api", f"Translating {phrase!r} with {client.model}")
    reply = client.complete_text(build_prompt(phrase), timeout=timeout)
    entry = parse_tagged_reply(reply)
    log_verbose(verbose, "api", f"{entry.english} -> {' '.join(entry.pinyin)} {''.join(entry.chinese)}")
    return entry
