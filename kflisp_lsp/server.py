from __future__ import annotations

"""
A minimal pygls-based Language Server for kflisp.

Features:
- Initialize/Shutdown/Exit
- Text synchronization and document store
- Diagnostics: syntax errors and lines that evaluate to an Error value
- Hover: operator descriptions, otherwise the value of the hovered line
- Completion: the six arithmetic operators
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    TextDocumentSyncKind,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_COMPLETION,
)

from kflisp import __version__, config
from kflisp.types.operator import Operator, OPERATOR_DOCS
from kflisp_lsp.analysis import DocumentReport, Finding, SEVERITY_ERROR, analyse, hover_text

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    report: DocumentReport


class KflispLanguageServer(LanguageServer):
    CMD_NAME = "kflisp-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__, text_document_sync_kind=TextDocumentSyncKind.Full)
        self.documents: Dict[str, DocumentState] = {}


ls = KflispLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _refresh(uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # full sync: the last change carries the whole buffer
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _refresh(uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


def _refresh(uri: str, text: str) -> None:
    report = analyse(text, filename=uri)
    ls.documents[uri] = DocumentState(text=text, report=report)
    logger.info("Analysed %s: %d finding(s)", uri, len(report.findings))
    ls.publish_diagnostics(uri, [to_diagnostic(f) for f in report.findings])


# --- Diagnostics ---
def to_diagnostic(finding: Finding) -> Diagnostic:
    return Diagnostic(
        range=Range(
            start=Position(line=finding.line, character=finding.col),
            end=Position(line=finding.line, character=finding.end_col),
        ),
        message=finding.message,
        severity=DiagnosticSeverity.Error if finding.severity == SEVERITY_ERROR else DiagnosticSeverity.Warning,
        source=KflispLanguageServer.CMD_NAME,
    )


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    contents = hover_text(state.text, state.report, params.position.line, params.position.character)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    items: List[CompletionItem] = [
        CompletionItem(label=op.value, kind=CompletionItemKind.Operator, detail=OPERATOR_DOCS[op])
        for op in Operator
    ]
    return CompletionList(is_incomplete=False, items=items)


def main() -> None:
    config.configure_logging()
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
