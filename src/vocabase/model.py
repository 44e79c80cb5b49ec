# -*- coding: utf-8 -*-
"""
Typed vocabulary records.

A Term carries the fields shared by every part of speech plus one
category-specific payload (``forms``). The payload type always matches
``category``:

    VERB       -> VerbForms
    NOUN       -> NounForms
    ADJECTIVE  -> AdjectiveForms
    ADVERB     -> AdverbForms
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class Category(str, Enum):
    VERB = "VERB"
    NOUN = "NOUN"
    ADJECTIVE = "ADJECTIVE"
    ADVERB = "ADVERB"


class Level(str, Enum):
    """CEFR proficiency level."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class Gender(str, Enum):
    """Noun gender, named after the definite article.

    The paired values are for nouns used with two genders.
    """

    DER = "DER"
    DIE = "DIE"
    DAS = "DAS"
    DER_DIE = "DER_DIE"
    DER_DAS = "DER_DAS"
    DAS_DIE = "DAS_DIE"


@dataclass(frozen=True)
class VerbTags:
    regular: bool = False
    separable: bool = False
    accusative: bool = False
    dative: bool = False
    genitive: bool = False
    reflexive: bool = False
    participle_with_sein: bool = False


@dataclass(frozen=True)
class VerbForms:
    past_participle: str  # prefixed with the auxiliary, e.g. "ist gegangen"
    simple_past: str
    prepositions: Tuple[str, ...] = ()
    tags: VerbTags = field(default_factory=VerbTags)


@dataclass(frozen=True)
class NounForms:
    gender: Gender
    plural: str


@dataclass(frozen=True)
class AdjectiveForms:
    comparative: str
    superlative: str


@dataclass(frozen=True)
class AdverbForms:
    pass


Forms = Union[VerbForms, NounForms, AdjectiveForms, AdverbForms]

FORMS_BY_CATEGORY = {
    Category.VERB: VerbForms,
    Category.NOUN: NounForms,
    Category.ADJECTIVE: AdjectiveForms,
    Category.ADVERB: AdverbForms,
}


@dataclass(frozen=True)
class Term:  # pylint: disable=too-many-instance-attributes
    """One dictionary entry, normalized."""

    text: str
    category: Category
    forms: Forms
    level: Optional[Level] = None
    definitions: Tuple[str, ...] = ()
    examples: Tuple[str, ...] = ()
    synonyms: Tuple[str, ...] = ()
    antonyms: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("term text must not be empty")
        expected = FORMS_BY_CATEGORY[self.category]
        if not isinstance(self.forms, expected):
            raise TypeError(
                f"{self.category.value} term needs {expected.__name__}, "
                f"got {type(self.forms).__name__}"
            )


# ------------------------------------------------------------
# JSON body
# ------------------------------------------------------------
def term_to_dict(term: Term) -> Dict[str, Any]:
    """Serialize a Term into a JSON-ready dict tagged with ``type``."""
    data: Dict[str, Any] = {
        "type": term.category.value,
        "term": term.text,
        "level": term.level.value if term.level else None,
        "definitions": list(term.definitions),
        "examples": list(term.examples),
        "synonyms": list(term.synonyms),
        "antonyms": list(term.antonyms),
    }
    forms = term.forms
    if isinstance(forms, VerbForms):
        data.update(
            past_participle=forms.past_participle,
            simple_past=forms.simple_past,
            prepositions=list(forms.prepositions),
            tags={
                "regular": forms.tags.regular,
                "separable": forms.tags.separable,
                "accusative": forms.tags.accusative,
                "dative": forms.tags.dative,
                "genitive": forms.tags.genitive,
                "reflexive": forms.tags.reflexive,
                "participle_with_sein": forms.tags.participle_with_sein,
            },
        )
    elif isinstance(forms, NounForms):
        data.update(gender=forms.gender.value, plural=forms.plural)
    elif isinstance(forms, AdjectiveForms):
        data.update(
            comparative=forms.comparative, superlative=forms.superlative
        )
    return data


def term_from_dict(data: Dict[str, Any]) -> Term:
    """Inverse of :func:`term_to_dict`."""
    category = Category(data["type"])
    forms: Forms
    if category is Category.VERB:
        forms = VerbForms(
            past_participle=data["past_participle"],
            simple_past=data["simple_past"],
            prepositions=tuple(data.get("prepositions") or ()),
            tags=VerbTags(**(data.get("tags") or {})),
        )
    elif category is Category.NOUN:
        forms = NounForms(gender=Gender(data["gender"]), plural=data["plural"])
    elif category is Category.ADJECTIVE:
        forms = AdjectiveForms(
            comparative=data["comparative"], superlative=data["superlative"]
        )
    else:
        forms = AdverbForms()
    level = data.get("level")
    return Term(
        text=data["term"],
        category=category,
        forms=forms,
        level=Level(level) if level else None,
        definitions=tuple(data.get("definitions") or ()),
        examples=tuple(data.get("examples") or ()),
        synonyms=tuple(data.get("synonyms") or ()),
        antonyms=tuple(data.get("antonyms") or ()),
    )
