"""Markdown rendering of changelog sections."""

from datetime import date
from typing import Iterable, Optional

from ..config import NEW_TAG_PLACEHOLDER
from .models import MergeInfo


SECTION_HEADER = "### Tag {tag} ({date})"
ENTRY_LINE = "* {title}. [#{merge_num}]({merge_url}) ([{user_name}]({user_profile_url}))"
DATE_FORMAT = "%Y-%m-%d"


def title_case(s: str) -> str:
    """Upper-case the first character of a trimmed title, keep the rest verbatim.

    >>> title_case("  add feature ")
    'Add feature'
    """
    s = s.strip()
    if not s:
        return ""

    first = s[0]
    titled = first.title()
    # Multi-character mappings (e.g. "ß" -> "Ss") leave the title as is
    if first.istitle() or len(titled) != 1:
        return s
    return titled + s[1:]


def render_section(merges: Iterable[MergeInfo], tag: str = NEW_TAG_PLACEHOLDER,
                   today: Optional[date] = None) -> str:
    """Render merges as a changelog section.

    Args:
        merges: Entries in output order
        tag: Tag name shown in the header
        today: Release date, defaults to the current date

    Returns:
        Markdown fragment starting with a blank line
    """
    today = today or date.today()
    lines = ["", SECTION_HEADER.format(tag=tag, date=today.strftime(DATE_FORMAT))]
    for merge in merges:
        lines.append(ENTRY_LINE.format(**merge.model_dump()))
    return "\n".join(lines) + "\n"
