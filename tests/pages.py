"""Hand-built verben.de-shaped pages and fakes that serve them."""

from typing import Dict, List, Optional, Sequence, Tuple

import requests

from vocabase.dom import parse_document
from vocabase.errors import RetrievalFailure
from vocabase.fetch import relation_url, search_url


def marker(title: str, text: str = "") -> str:
    return f'<span title="{title}">{text or title}</span>'


def term_page(
    headword: str,
    flexion: str,
    markers: Sequence[str],
    level: Optional[str] = "A1",
    definitions: str = "go",
    info_extra: str = "",
    examples: str = "",
) -> str:
    level_html = ""
    if level is not None:
        level_html = f'<span class="bZrt">{level}</span>'
    return f"""<html><body>
<div class="rBox rBoxWht">
  <div class="rAufZu">
    <div id="wStckInf">
      <div id="wStckKrz">
        <div><b>{headword}</b></div>
        <p>{flexion}</p>
      </div>
      {info_extra}
      <span class="rInf">
        {level_html}
        {" ".join(markers)}
      </span>
    </div>
    <p class="r1Zeile rU6px rO0px"><span lang="en">{definitions}</span></p>
  </div>
</div>
{examples}
</body></html>"""


def examples_section(*items: str, label: str = "Beispielsätze") -> str:
    lis = "".join(f"<li>{item}</li>" for item in items)
    return (
        '<section class="rBox rBoxWht">'
        f"<header><h2>{label}</h2></header>"
        f'<div class="rAufZu"><ul class="rLst rLstGt">{lis}</ul></div>'
        "</section>"
    )


def relation_block(label: str, entries: Optional[Sequence[str]]) -> str:
    if entries is None:
        body = "<p>Keine Einträge</p>"
    else:
        body = "<dl>" + "".join(
            f'<dd><span class="wIdx">{i}</span><span>{entry}</span></dd>'
            for i, entry in enumerate(entries, 1)
        ) + "</dl>"
    return (
        '<section class="rBox rBoxWht"><div class="rAufZu">'
        f"<h2>{label}</h2>{body}</div></section>"
    )


def relation_page(
    synonyms: Optional[Sequence[str]] = None,
    antonyms: Optional[Sequence[str]] = None,
) -> str:
    blocks = []
    if synonyms is not None:
        blocks.append(relation_block("Synonyme", synonyms))
    if antonyms is not None:
        blocks.append(relation_block("Antonyme (Gegenteil)", antonyms))
    return "<html><body>" + "".join(blocks) + "</body></html>"


GEHEN = term_page(
    headword="gehen,\n ging",
    flexion="gehen · ging · ist gegangen",
    markers=[
        marker("Verb"),
        marker("unregelmäßiges Verb", "unr."),
        marker("Hilfsverb 'sein'", "sein"),
    ],
    level="a1",
    definitions="go, walk, go (on foot), walk",
    info_extra=(
        marker("'zu' Präposition", "zu")
        + marker("'nach' Präposition", "nach")
        + marker("'zu' Präposition", "zu")
    ),
    examples=examples_section(
        "Er   geht \u00a0nach Hause .<br/><span>[1]</span>",
        "Wir gehen , wenn es regnet .",
        "Er geht nach Hause.",
    ),
)

GEHEN_RELATIONS = relation_page(
    synonyms=["laufen ≡\u00a0wandern", "schreiten, ..."],
    antonyms=["stehen"],
)

ANFANGEN = term_page(
    headword="anfangen",
    flexion="anfangen · fing an · hat angefangen",
    markers=[
        marker("Verb"),
        marker("trennbares Verb", "trennbar"),
        marker("mit Akkusativobjekt", "Akk."),
        marker("Hilfsverb 'haben'", "haben"),
    ],
    level="B1",
    definitions="begin, start",
)

HUND = term_page(
    headword="Hund, der",
    flexion="der Hund · Hunde⁰ · Hund(e)s",
    markers=[marker("Substantiv"), marker("Genus maskulin", "der")],
    level="B1",
    definitions="dog, hound",
)

SCHOEN = term_page(
    headword="schön",
    flexion="schön · schöner · am schönsten",
    markers=[marker("Adjektiv")],
    level="A1",
    definitions="beautiful, nice, lovely",
)

GERN = term_page(
    headword="gern",
    flexion="gern · lieber · am liebsten",
    markers=[marker("Adverb")],
    level=None,
    definitions="gladly, willingly",
)


class FakeFetcher:
    """Serves pages from dicts keyed by query and by relation URL."""

    def __init__(
        self,
        pages: Optional[Dict[str, str]] = None,
        relations: Optional[Dict[str, str]] = None,
    ) -> None:
        self.pages = pages or {}
        self.relations = relations or {}
        self.searches: List[str] = []
        self.relation_calls: List[Tuple[object, str]] = []

    def search(self, query):
        self.searches.append(query)
        if query not in self.pages:
            raise RetrievalFailure(search_url(query), "404 Not Found", 404)
        return parse_document(self.pages[query])

    def relation_page(self, category, text):
        self.relation_calls.append((category, text))
        url = relation_url(category, text)
        if url not in self.relations:
            raise RetrievalFailure(url, "404 Not Found", 404)
        return parse_document(self.relations[url])


class PageResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(
                f"{self.status_code} Error", response=self
            )


class PageSession:
    """Stands in for ``requests.Session``, serving bodies by URL."""

    def __init__(self, bodies: Dict[str, str]) -> None:
        self.bodies = bodies
        self.urls: List[str] = []
        self.closed = False

    def get(self, url, timeout=None):
        self.urls.append(url)
        if url not in self.bodies:
            return PageResponse("", 404)
        return PageResponse(self.bodies[url])

    def close(self) -> None:
        self.closed = True
