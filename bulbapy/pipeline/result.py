"""Parse carrier shared by the format runner and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bulbapy.diagnostics import has_errors
from bulbapy.options import ParserOptions

if TYPE_CHECKING:
    from bulbapy.diagnostics import Diagnostic
    from bulbapy.document import DocMap
    from bulbapy.lexer import Token


@dataclass(slots=True)
class BulbaParseResult:
    """Outcome of one lex + parse run over a source text.

    `document` is `None` whenever `diagnostics` holds an error; no partial
    document is kept.
    """

    source_text: str
    tokens: list[Token]
    document: DocMap | None
    diagnostics: list[Diagnostic]
    options: ParserOptions = field(default_factory=ParserOptions)
    source_path: str = "<memory>"
    _canonical_text: str | None = field(default=None, init=False, repr=False)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def root(self) -> DocMap:
        if self.document is None:
            raise ValueError(f"{self.source_path} did not parse; check diagnostics")
        return self.document

    def canonical_text(self) -> str:
        if self._canonical_text is None:
            from bulbapy.format import to_canonical_string

            self._canonical_text = to_canonical_string(self.root())
        return self._canonical_text
