# -*- coding: utf-8 -*-
"""
Anki flashcard export.

Each Term becomes one line of an Anki text import: the front is the
headword, the back is a sequence of titled sections separated by
``<hr>``, and the two fields are separated by ``;``. A field holding
``;``, ``"`` or a newline is wrapped in double quotes with inner quotes
doubled, which Anki's text import reads as one field.
"""

from typing import List, Mapping, Sequence, Tuple

from bs4 import BeautifulSoup

from .model import (
    AdjectiveForms,
    Category,
    Gender,
    NounForms,
    Term,
    VerbForms,
    VerbTags,
)

SECTION_SEPARATOR = "<hr>"
LIST_SEPARATOR = " / "
FIELD_SEPARATOR = ";"

DECK_ORDER = (
    Category.VERB,
    Category.NOUN,
    Category.ADJECTIVE,
    Category.ADVERB,
)

GENDER_LABELS = {
    Gender.DER: "Der",
    Gender.DIE: "Die",
    Gender.DAS: "Das",
    Gender.DER_DIE: "Der/Die",
    Gender.DER_DAS: "Der/Das",
    Gender.DAS_DIE: "Das/Die",
}

_SOUP = BeautifulSoup("", "html.parser")


def _element(name: str, content: str = "") -> str:
    tag = _SOUP.new_tag(name)
    tag.string = content
    return str(tag)


def _field(value: str) -> str:
    if any(char in value for char in (FIELD_SEPARATOR, '"', "\n")):
        return '"' + value.replace('"', '""') + '"'
    return value


def _section(title: str, content: str) -> str:
    return f"<div>{_element('h2', title)}{_element('span', content)}</div>"


def format_tags(tags: VerbTags) -> str:
    labels = ["Regular" if tags.regular else "Irregular"]
    if tags.accusative:
        labels.append("Accusative")
    if tags.dative:
        labels.append("Dative")
    if tags.genitive:
        labels.append("Genitive")
    if tags.reflexive:
        labels.append("Reflexive")
    if tags.participle_with_sein:
        labels.append("PPII Mit Sein")
    labels.append("Separable" if tags.separable else "Inseparable")
    return LIST_SEPARATOR.join(labels)


def _sections(term: Term) -> List[Tuple[str, str]]:
    forms = term.forms
    sections = [("Definitions", LIST_SEPARATOR.join(term.definitions))]
    if isinstance(forms, VerbForms):
        sections += [
            ("PPII", forms.past_participle),
            ("Preterite", forms.simple_past),
            ("Prepositions", LIST_SEPARATOR.join(forms.prepositions)),
        ]
    elif isinstance(forms, NounForms):
        sections += [
            ("Article", GENDER_LABELS[forms.gender]),
            ("Plural", forms.plural),
        ]
    elif isinstance(forms, AdjectiveForms):
        sections += [
            ("Comparative", forms.comparative),
            ("Superlative", forms.superlative),
        ]
    sections += [
        ("Synonyms", LIST_SEPARATOR.join(term.synonyms)),
        ("Antonyms", LIST_SEPARATOR.join(term.antonyms)),
    ]
    if isinstance(forms, VerbForms):
        sections.append(("Tags", format_tags(forms.tags)))
    sections.append(("Examples", LIST_SEPARATOR.join(term.examples)))
    return sections


def format_card(term: Term) -> str:
    """Render one Term as an Anki import line (without newline)."""
    back = SECTION_SEPARATOR.join(
        _section(title, content) for title, content in _sections(term)
    )
    front = _element("h1", term.text)
    return _field(front) + FIELD_SEPARATOR + _field(back)


def format_deck(terms_by_category: Mapping[Category, Sequence[Term]]) -> str:
    """Render all terms, verbs first, one card per line."""
    lines = []
    for category in DECK_ORDER:
        for term in terms_by_category.get(category, ()):
            lines.append(format_card(term) + "\n")
    return "".join(lines)
