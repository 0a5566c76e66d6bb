"""
DocumentWalker: apply a TextCleaner to every text node of a Word document.

Traversal order (document order within each part):
    body paragraphs and tables (cells, nested tables)
    -> section headers and footers (each distinct part once)

Block-level content controls (<w:sdt>) in the body, in cells and in
headers/footers are opened and their paragraphs and tables visited in place.

Within a paragraph, the fragments are the <w:t> elements of its runs,
including runs wrapped in hyperlinks, tracked insertions, content controls,
simple fields, smart tags and custom XML. Deleted text (<w:delText>) is
left as recorded. Only text changes; paragraph and run boundaries,
formatting, tabs, breaks and drawings are left alone.

Cleaning is dispatched per paragraph through an ExecutorStrategy. Workers
receive plain strings and return FragmentResults; the XML tree is read and
written only from the calling thread.
"""

from dataclasses import dataclass
from typing import Iterator

from docx.document import Document as DocumentObject
from docx.oxml.ns import qn
from docx.table import Table, _Cell
from docx.text.paragraph import Paragraph

from src.logging_config import debug_log
from src.parallel import ExecutorStrategy, SequentialStrategy
from src.sanitization.text_cleaner import FragmentResult, TextCleaner

# Union of run containers that can appear directly in a <w:p>; lxml returns
# the matches once each, in document order
_FRAGMENT_XPATH = " | ".join((
    "./w:r/w:t",
    "./w:hyperlink/w:r/w:t",
    "./w:ins//w:r/w:t",
    "./w:sdt//w:r/w:t",
    "./w:fldSimple//w:r/w:t",
    "./w:smartTag//w:r/w:t",
    "./w:customXml//w:r/w:t",
))

_HEADER_FOOTER_ATTRS = (
    "header",
    "first_page_header",
    "even_page_header",
    "footer",
    "first_page_footer",
    "even_page_footer",
)


@dataclass
class WalkStats:
    """
    Summary of one walk over a document.

    Attributes:
        paragraphs: Paragraphs visited (body, tables, headers, footers)
        fragments: Text nodes visited
        fragments_changed: Text nodes whose content was rewritten
        characters_replaced: Disallowed characters replaced
        space_runs_collapsed: Multi-space stretches collapsed
    """
    paragraphs: int = 0
    fragments: int = 0
    fragments_changed: int = 0
    characters_replaced: int = 0
    space_runs_collapsed: int = 0


class DocumentWalker:
    """
    Clean all text of a python-docx Document in place.

    Args:
        cleaner: TextCleaner bound to the shared RuleTable and CounterStore
        strategy: How paragraphs are dispatched; SequentialStrategy if None
        include_tables: Visit paragraphs inside tables
        include_headers_footers: Visit section headers and footers
    """

    def __init__(
        self,
        cleaner: TextCleaner,
        strategy: ExecutorStrategy | None = None,
        include_tables: bool = True,
        include_headers_footers: bool = True,
    ):
        self.cleaner = cleaner
        self.strategy = strategy or SequentialStrategy()
        self.include_tables = include_tables
        self.include_headers_footers = include_headers_footers

    def walk(self, document: DocumentObject) -> WalkStats:
        """
        Clean every text node reachable from `document`.

        Counters in the cleaner's CounterStore are incremented as a side
        effect; resetting them is the caller's job.
        """
        paragraphs = list(self.iter_paragraphs(document))
        nodes_per_paragraph = [self._text_nodes(paragraph) for paragraph in paragraphs]
        texts_per_paragraph = [[node.text or "" for node in nodes] for nodes in nodes_per_paragraph]

        debug_log(
            f"[WALKER] Cleaning {len(paragraphs)} paragraphs "
            f"with {self.strategy.max_workers} worker(s)"
        )

        stats = WalkStats(paragraphs=len(paragraphs))
        results = self.strategy.map(self._clean_texts, texts_per_paragraph)

        for nodes, texts, paragraph_results in zip(nodes_per_paragraph, texts_per_paragraph, results):
            for node, original, result in zip(nodes, texts, paragraph_results):
                stats.fragments += 1
                stats.characters_replaced += result.replaced
                stats.space_runs_collapsed += result.space_runs_collapsed
                if result.text != original:
                    self._set_text(node, result.text)
                    stats.fragments_changed += 1

        debug_log(
            f"[WALKER] Visited {stats.fragments} text nodes, rewrote {stats.fragments_changed}, "
            f"replaced {stats.characters_replaced} characters"
        )
        return stats

    def iter_paragraphs(self, document: DocumentObject) -> Iterator[Paragraph]:
        """Yield each paragraph of the document exactly once."""
        yield from self._iter_container(document)

        if not self.include_headers_footers:
            return

        seen_parts = set()
        for section in document.sections:
            for attr in _HEADER_FOOTER_ATTRS:
                header_footer = getattr(section, attr)
                # Linked definitions belong to an earlier section (or to none)
                if header_footer.is_linked_to_previous:
                    continue
                part = header_footer.part
                if part in seen_parts:
                    continue
                seen_parts.add(part)
                yield from self._iter_container(header_footer)

    def _iter_container(self, container) -> Iterator[Paragraph]:
        if isinstance(container, DocumentObject):
            yield from self._iter_blocks(container.element.body, container._body)
        else:
            yield from self._iter_blocks(container._element, container)

    def _iter_blocks(self, element, parent) -> Iterator[Paragraph]:
        for child in element.iterchildren():
            if child.tag == qn("w:p"):
                yield Paragraph(child, parent)
            elif child.tag == qn("w:tbl"):
                if self.include_tables:
                    yield from self._iter_table(Table(child, parent))
            elif child.tag == qn("w:sdt"):
                content = child.find(qn("w:sdtContent"))
                if content is not None:
                    yield from self._iter_blocks(content, parent)

    def _iter_table(self, table: Table) -> Iterator[Paragraph]:
        # table.rows[i].cells repeats merged cells; the <w:tc> elements do not
        for tr in table._tbl.tr_lst:
            for tc in tr.tc_lst:
                yield from self._iter_blocks(tc, _Cell(tc, table))

    @staticmethod
    def _text_nodes(paragraph: Paragraph) -> list:
        """The <w:t> elements of a paragraph, in order."""
        return paragraph._p.xpath(_FRAGMENT_XPATH)

    def _clean_texts(self, texts: list[str]) -> list[FragmentResult]:
        return [self.cleaner.clean_fragment(text) for text in texts]

    @staticmethod
    def _set_text(node, text: str) -> None:
        node.text = text
        # Word drops leading/trailing spaces unless told to keep them
        if text != text.strip():
            node.set(qn("xml:space"), "preserve")
