import logging

from docsum.core.logging import (
    ContextFormatter,
    ContextInjectionFilter,
    ThirdPartyFilter,
    get_log_context,
    log_context,
)


def _record(name: str = "docsum.test", level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord(name, level, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_log_context_nests_and_resets() -> None:
    with log_context(request_id="r1"):
        with log_context(path="/api/summarize"):
            assert get_log_context() == {"request_id": "r1", "path": "/api/summarize"}
        assert get_log_context() == {"request_id": "r1"}
    assert get_log_context() == {}


def test_context_fields_are_injected_and_formatted() -> None:
    record = _record()
    formatter = ContextFormatter("%(levelname)s %(message)s")

    with log_context(request_id="r1"):
        ContextInjectionFilter().filter(record)

    assert formatter.format(record) == "INFO hello world [request_id=r1]"


def test_third_party_info_is_dropped() -> None:
    third_party = ThirdPartyFilter()

    assert third_party.filter(_record("docsum.api", logging.DEBUG))
    assert not third_party.filter(_record("httpx", logging.INFO))
    assert third_party.filter(_record("httpx", logging.WARNING))
    assert third_party.filter(_record("uvicorn.error", logging.INFO))
    assert not third_party.filter(_record("pypdf._reader", logging.WARNING))
