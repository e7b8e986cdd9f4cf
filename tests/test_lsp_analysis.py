import pytest

from kflisp_lsp.analysis import analyse, hover_text, word_at, SEVERITY_ERROR, SEVERITY_WARNING

DOC = "(+ 1 2)\n  (/ 1 0)  \n\n(+ 1\n"


def test_results_per_line():
    report = analyse(DOC)
    assert report.results == {0: "3", 1: "Error: Division by zero!"}


def test_findings():
    report = analyse(DOC)
    assert [(f.line, f.col, f.end_col, f.severity) for f in report.findings] == [
        (1, 2, 9, SEVERITY_WARNING),
        (3, 4, 5, SEVERITY_ERROR),
    ]
    assert report.findings[0].message == "Division by zero!"
    assert "expected one of number, symbol, '(' or ')' at end of input" in report.findings[1].message


def test_clean_document_has_no_findings():
    assert analyse("(* 2 3)\n(- 5)\n").findings == []


@pytest.mark.parametrize(
    "line,character,expected",
    [(0, 1, "+"), (0, 3, "1"), (1, 0, None), (9, 0, None), (0, 20, None), (3, 20, "1")],
)
def test_word_at(line, character, expected):
    assert word_at(DOC, line, character) == expected


def test_hover_on_operator_describes_it():
    report = analyse(DOC)
    assert hover_text(DOC, report, 0, 1).startswith("(+ a b ...)")


def test_hover_elsewhere_shows_line_value():
    report = analyse(DOC)
    assert hover_text(DOC, report, 0, 3) == "=> 3"
    assert hover_text(DOC, report, 3, 0) is None


def test_hover_past_end_of_line_clamps_to_line_end():
    report = analyse(DOC)
    assert hover_text(DOC, report, 0, 20) == "=> 3"
    assert hover_text(DOC, report, 3, 20) is None


def test_only_lsp_line_breaks_split_lines():
    # a form feed is whitespace inside the line, not a line break
    report = analyse("(+ 1 2)\x0c(/ 1 0)\n(% 1 0)")
    assert [(f.line, f.message) for f in report.findings] == [
        (0, "Division by zero!"),
        (1, "Modulo by zero!"),
    ]


def test_crlf_and_cr_line_breaks():
    report = analyse("(+ 1 2)\r\n(/ 1 0)\r(- 5)")
    assert report.results == {0: "3", 1: "Error: Division by zero!", 2: "-5"}


def test_server_converts_findings_to_diagnostics():
    pytest.importorskip("pygls")
    from lsprotocol.types import DiagnosticSeverity
    from kflisp_lsp.server import to_diagnostic

    finding = analyse("(% 1 0)").findings[0]
    diag = to_diagnostic(finding)
    assert diag.message == "Modulo by zero!"
    assert diag.severity == DiagnosticSeverity.Warning
    assert (diag.range.start.character, diag.range.end.character) == (0, 7)
