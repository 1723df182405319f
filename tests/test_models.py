from pathlib import Path

from mvnfetch.modules.artifactfetch.domain import Outcome, OutcomeStatus, summarize


def test_summarize_counts_and_keeps_failures_in_order():
    outcomes = [
        Outcome("g:a:1", OutcomeStatus.SUCCESS, url="https://repo/g/a/1/a-1.jar", path=Path("a-1.jar")),
        Outcome("bogus", OutcomeStatus.PARSE_ERROR, message="invalid"),
        Outcome("g:b:1", OutcomeStatus.FETCH_ERROR, message="404"),
        Outcome("g:c:1", OutcomeStatus.SUCCESS, url="https://repo/g/c/1/c-1.jar"),
    ]

    summary = summarize(outcomes)

    assert summary.total == 4
    assert summary.succeeded == 2
    assert summary.failed == 2
    assert [o.coordinate for o in summary.failures] == ["bogus", "g:b:1"]
    assert summary.has_failures


def test_summarize_empty_batch():
    summary = summarize([])

    assert summary.total == 0
    assert summary.failures == []
    assert not summary.has_failures
