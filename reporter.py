"""Console reporting of persons whose Scopus ID appears in an ORCID profile."""

from __future__ import annotations

import sys
from typing import TextIO

from models import Person, SearchResult


def report_match(person: Person, result: SearchResult, stream: TextIO | None = None) -> bool:
    """Print the person and raw search body when the search found at least one profile.

    Returns True when something was printed.
    """
    if result.num_found <= 0:
        return False

    out = stream if stream is not None else sys.stdout
    out.write(f"This person:\n {person}\nhas their Scopus ID in their ORCID profile.\n")
    out.write(f"{result.body}\n")
    out.flush()
    return True
