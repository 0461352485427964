from docsum.core.errors import InvalidSummaryLengthError
from docsum.schemas.summaries import SummaryLength


def parse_summary_length(raw: str | None) -> SummaryLength:
    value = (raw or "").strip().lower()
    if not value:
        return SummaryLength.MEDIUM
    try:
        return SummaryLength(value)
    except ValueError:
        raise InvalidSummaryLengthError(f"Invalid summary length: {raw!r}") from None
