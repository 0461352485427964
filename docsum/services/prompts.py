from __future__ import annotations

from docsum.core.constants import SUMMARY_PROMPT_TEMPLATE
from docsum.schemas.summaries import SummaryLength


def build_summary_prompt(text: str, length: SummaryLength) -> str:
    # The document text goes in verbatim. Nothing is escaped or truncated, so
    # instructions inside the document reach the model unchanged.
    return SUMMARY_PROMPT_TEMPLATE.format(length=length.value, text=text)
