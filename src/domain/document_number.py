"""Document Number Allocator

Numbers look like IV-20260205-0001: company prefix, issue date, and a
per-day sequence derived from how many documents of the same kind already
carry that prefix and date. The sequence is count based, so it tolerates
gaps and is not strictly unique under concurrent writers.
"""

from datetime import date


def number_segment(prefix: str, issue_date: date) -> str:
    """Prefix and date part shared by all numbers of one day: IV-20260205"""
    return f"{prefix}-{issue_date.strftime('%Y%m%d')}"


def allocate_number(prefix: str, issue_date: date, existing_count: int) -> str:
    """
    Build the next document number

    Args:
        prefix: Kind prefix configured for the company (e.g., IV, QT)
        issue_date: Document issue date (not the wall-clock date)
        existing_count: Documents already numbered with this prefix and date,
            excluding the document being saved

    Returns:
        Number string formatted {prefix}-{YYYYMMDD}-{seq:04d}
    """
    return f"{number_segment(prefix, issue_date)}-{existing_count + 1:04d}"


def number_matches(document_number: str, prefix: str, issue_date: date) -> bool:
    """Whether a number already encodes this prefix and issue date"""
    if not document_number:
        return False
    return document_number.startswith(number_segment(prefix, issue_date) + "-")


def needs_renumber(
    document_number: str, prefix: str, issue_date: date, leaving_draft: bool
) -> bool:
    """
    Decide whether a draft save must allocate a fresh number

    A draft is renumbered when its issue date no longer matches the date in
    its number, and once more on the save that takes it out of draft.
    Callers must not ask for non-draft documents: their numbers are frozen.
    """
    if leaving_draft:
        return True
    return not number_matches(document_number, prefix, issue_date)
