import re
from datetime import date

from ...model import DiagnosticCode
from ...report import Report
from ..core import lint_spec
from ..models import DocumentNode, NodeKind
from ..predicates import is_element

# e.g. "2 January 2006": day without a required leading zero, full month name, 4-digit year.
# An optional single leading space pads one-digit days.
DATE_PATTERN = re.compile(r" ?([0-9]{1,2}) ([A-Za-z]+) ([0-9]{4})")
TIME_FORMAT_EXAMPLE = "2 January 2006"

# Fixed English names; strptime's %B would follow the process locale
MONTHS = {
    name: number for number, name in enumerate(
        ("january", "february", "march", "april", "may", "june", "july",
         "august", "september", "october", "november", "december"),
        start=1
    )
}


def parses_as_date(text: str) -> bool:
    match = DATE_PATTERN.fullmatch(text)
    if match is None:
        return False
    day, month_name, year = match.groups()
    month = MONTHS.get(month_name.lower())
    if month is None:
        return False
    try:
        date(int(year), month, int(day))
    except ValueError:
        return False
    return True


@lint_spec(codes=[DiagnosticCode.TIME_NEEDS_TEXT, DiagnosticCode.TIME_BAD_FORMAT])
def lint_time_formatting(report: Report, node: DocumentNode, source: str) -> None:
    """
    Rule: <time> holds exactly one text child, written like "2 January 2006".
    A date that does not parse (including impossible days such as
    31 February) is reported together with the offending text.
    """
    if not is_element(node, "time"):
        return

    if len(node.children) != 1 or node.children[0].kind != NodeKind.TEXT:
        report.record(source, DiagnosticCode.TIME_NEEDS_TEXT, "<time> needs exactly 1 text child")
        return

    text = node.children[0].text
    if not parses_as_date(text):
        report.record(
            source,
            DiagnosticCode.TIME_BAD_FORMAT,
            f"<time> child does not have correct format (like '{TIME_FORMAT_EXAMPLE}'):",
            detail=repr(text)
        )
