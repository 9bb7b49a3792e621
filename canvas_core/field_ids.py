"""
Field identifiers.

An answer is addressed by `step-{page_index}-{slug}` where the slug is
derived from the question text. The id depends on nothing but its
inputs, so an exported file can be restored on any machine as long as
the page definition did not change.
"""

import re
import unicodedata

_NON_ALNUM = re.compile(r'[^a-z0-9]+')


def slugify(value: str) -> str:
    """Lower-case ASCII slug: accents dropped, other runs collapsed to '-'."""
    decomposed = unicodedata.normalize('NFD', value.lower())
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALNUM.sub('-', stripped).strip('-')


def make_field_id(page_index: int, question: str) -> str:
    return f"step-{page_index}-{slugify(question)}"


def help_id(field_id: str) -> str:
    """Element id of the help text attached to a field."""
    return f"{field_id}-help"
