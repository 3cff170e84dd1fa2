# tests/core/test_report.py
import io

import pytest
from pydantic import ValidationError

from markup_lint.model import Diagnostic, DiagnosticCode
from markup_lint.report import Report


def test_record_writes_immediately_and_counts():
    """Each record is visible on the stream right away, in call order."""
    stream = io.StringIO()
    report = Report(stream=stream)

    report.record("a.html", DiagnosticCode.MISSING_ALT, "<img> missing alt")
    assert stream.getvalue() == "a.html <img> missing alt\n"
    assert report.count == 1

    report.record("b.html", DiagnosticCode.UNCLOSED_TAGS, "Unclosed tags", detail="<div>")
    assert stream.getvalue().splitlines() == ["a.html <img> missing alt", "b.html Unclosed tags <div>"]
    assert report.count == 2


def test_count_accumulates_across_sources():
    report = Report(stream=io.StringIO())
    for source in ("one.html", "two.html", "one.html"):
        report.record(source, DiagnosticCode.DEPRECATED_A_NAME, "<a> has name; should use id")
    assert report.count == 3
    assert len(report.for_source("one.html")) == 2
    assert report.for_source("missing.html") == []


def test_defaults_to_stderr(capsys):
    report = Report()
    report.record("<stdin>", DiagnosticCode.MISSING_ALT, "<img> missing alt")
    captured = capsys.readouterr()
    assert captured.err == "<stdin> <img> missing alt\n"
    assert captured.out == ""


def test_diagnostic_is_immutable():
    diagnostic = Diagnostic(source="a.html", code=DiagnosticCode.MISSING_ALT, message="<img> missing alt")
    with pytest.raises(ValidationError):
        diagnostic.message = "changed"


def test_diagnostic_str():
    plain = Diagnostic(source="a.html", code=DiagnosticCode.MISSING_WIDTH, message="<img> missing width")
    detailed = Diagnostic(source="a.html", code=DiagnosticCode.UNMATCHED_PAIR, message="Unmatched pair", detail="</b> <i>")
    assert str(plain) == "a.html <img> missing width"
    assert str(detailed) == "a.html Unmatched pair </b> <i>"
