# tests/core/test_qngine.py
import io

import pytest

from markup_lint.dom.builder import DOMBuilder
from markup_lint.dom.models import DocumentNode, NodeKind
from markup_lint.dom.qngine import lint_tree
from markup_lint.dom.registry import RULE_BATTERY, get_all_possible_codes
from markup_lint.model import DiagnosticCode
from markup_lint.report import Report

CLEAN_DOCUMENT = """<!DOCTYPE html>
<html lang="en">
<head><title>Goats</title><script type="module" src="app.js"></script><style>p { quotes: "“" "”"; }</style></head>
<body>
<h1>Goat’s diary</h1>
<figure><img src="goat.jpg" alt="A goat" width="640" height="480" loading="lazy"/><figcaption>A goat, “probably”.</figcaption></figure>
<p>Published <time>2 January 2006</time>. See <a id="more" href="#more">more</a>.</p>
<pre>print("straight quotes are fine here")</pre>
<iframe src="map.html" loading="lazy"></iframe>
</body>
</html>
"""


@pytest.fixture
def report():
    return Report(stream=io.StringIO())


def test_clean_document_has_no_diagnostics(report):
    lint_tree(report, DOMBuilder().parse_doc(CLEAN_DOCUMENT), "clean.html")
    assert report.count == 0
    assert report.stream.getvalue() == ""


def test_empty_document_has_no_diagnostics(report):
    lint_tree(report, DOMBuilder().parse_doc(""), "empty.html")
    assert report.count == 0


def test_walk_is_pre_order(report):
    """Diagnostics come out in document order: parents before children, siblings left to right."""
    document = DOMBuilder().parse_doc(
        '<figure><img src="a" alt="a" width="1" height="1"/></figure>'
        '<a name="b"></a>'
    )
    lint_tree(report, document, "order.html")
    assert [d.code for d in report.diagnostics] == [
        DiagnosticCode.FIGURE_MISSING_FIGCAPTION,
        DiagnosticCode.MISSING_LAZY_LOADING,
        DiagnosticCode.DEPRECATED_A_NAME,
    ]


def test_walk_is_idempotent():
    """Walking the same tree twice yields identical diagnostic sequences."""
    document = DOMBuilder().parse_doc(
        '<img src="x"><time>someday</time><p>"quoted"</p><figure></figure><a name="n"></a>'
    )
    first, second = Report(stream=io.StringIO()), Report(stream=io.StringIO())

    lint_tree(first, document, "twice.html")
    lint_tree(second, document, "twice.html")

    assert first.count > 0
    assert first.diagnostics == second.diagnostics
    assert first.stream.getvalue() == second.stream.getvalue()


def test_walk_starts_at_given_subtree(report):
    """Only the given node and its descendants are visited."""
    root = DocumentNode(kind=NodeKind.DOCUMENT)
    root.adopt(DocumentNode(kind=NodeKind.ELEMENT, tag="a", attrs={"name": "outside"}))
    section = root.adopt(DocumentNode(kind=NodeKind.ELEMENT, tag="section"))
    section.adopt(DocumentNode(kind=NodeKind.ELEMENT, tag="a", attrs={"name": "inside"}))

    lint_tree(report, section, "subtree.html")
    assert report.count == 1


def test_deeply_nested_document_is_walked_completely(report):
    """Nesting far beyond the recursion limit must not abort the walk."""
    depth = 1500
    html = "<div>" * depth + '<a name="deep"></a>' + "</div>" * depth
    lint_tree(report, DOMBuilder().parse_doc(html), "deep.html")
    assert [d.code for d in report.diagnostics] == [DiagnosticCode.DEPRECATED_A_NAME]


def test_rule_battery_is_fixed():
    assert len(RULE_BATTERY) == 8
    assert all(hasattr(rule, "defined_codes") for rule in RULE_BATTERY)


def test_all_possible_codes_cover_every_diagnostic_code():
    assert get_all_possible_codes() == sorted(code.value for code in DiagnosticCode)
