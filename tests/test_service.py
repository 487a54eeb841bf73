import pytest
from fakes import FakeResponse, HtmlResponse, PagedAPI, factory_for, issue, page, pages

from jira_score.core.credentials import CredentialStore
from jira_score.core.errors import CredentialsNotConfiguredError, JiraAPIError, MissingQueryError
from jira_score.core.models import Credentials, ScoringConfig, ScoringMethod
from jira_score.core.service import IssueService


def _store():
    return CredentialStore(Credentials("https://example.atlassian.net/", "me@example.com", "secret"))


def test_requires_credentials_before_query():
    factory = factory_for()
    service = IssueService(CredentialStore(), api_factory=factory)
    with pytest.raises(CredentialsNotConfiguredError):
        service.fetch_ticket_report("")
    assert factory.seen == []


def test_requires_query():
    api = PagedAPI([])
    service = IssueService(_store(), api_factory=factory_for(api))
    with pytest.raises(MissingQueryError, match="JQL query is required"):
        service.fetch_ticket_report("   ")
    assert api.session.calls == []


def test_ticket_report_scores_and_aggregates():
    raw = [
        issue("PROJ-1", status="Done", priority="High"),
        issue("PROJ-2", status="In Progress", priority="High"),
        issue("PROJ-3", status="Ready to Test", priority="Low"),
        issue("PROJ-4", status="To Do", priority="Highest"),
    ]
    api = PagedAPI([page(raw[:2], token="t"), page(raw[2:])])
    service = IssueService(_store(), api_factory=factory_for(api))
    report = service.fetch_ticket_report("project = PROJ", ScoringConfig(method=ScoringMethod.PRIORITY))

    assert report.total_tickets == 4
    assert [t.score for t in report.tickets] == [4, 4, 2, 5]
    assert report.total_score == 15
    assert report.avg_score == "3.75"
    assert report.quality_score.quality_score_percentage == "36.36"
    assert report.pagination_info.pages_fetched == 2
    assert report.pagination_info.had_multiple_pages is True
    assert report.tickets[0].url == "https://example.atlassian.net/browse/PROJ-1"
    assert report.fetched_at is not None


def test_ticket_defaults_applied():
    api = PagedAPI([page([issue("PROJ-9", priority=None)])])
    service = IssueService(_store(), api_factory=factory_for(api))
    ticket = service.fetch_ticket_report("x").tickets[0]
    assert ticket.priority == "None"
    assert ticket.assignee == "Unassigned"
    assert ticket.story_points == 0
    assert ticket.score == 0


def test_empty_report():
    api = PagedAPI([page([])])
    service = IssueService(_store(), api_factory=factory_for(api))
    report = service.fetch_ticket_report("x")
    assert report.avg_score == "0.00"
    assert report.quality_score.quality_score_percentage == "0.00"


def test_service_page_cap_marks_truncated():
    api = PagedAPI(pages(5))
    service = IssueService(_store(), api_factory=factory_for(api), max_pages=2)
    report = service.fetch_ticket_report("x")
    assert report.truncated is True
    assert report.total_tickets == 4


def test_api_error_propagates():
    responses = pages(3)
    responses[1] = FakeResponse(401, {"errorMessages": ["Unauthorized"]}, reason="Unauthorized")
    service = IssueService(_store(), api_factory=factory_for(PagedAPI(responses)))
    with pytest.raises(JiraAPIError):
        service.fetch_ticket_report("x")


def test_credentials_read_per_call():
    store = _store()
    factory = factory_for(PagedAPI([page([])]), PagedAPI([page([])]))
    service = IssueService(store, api_factory=factory)
    service.fetch_ticket_report("x")
    store.save("https://other.net", "b@example.com", "t2")
    service.fetch_ticket_report("x")
    assert factory.seen[1] == ("https://other.net", "b@example.com", "t2")


def test_support_report_counts_statuses():
    raw = [issue("S-1", status="Open"), issue("S-2", status="Done"), issue("S-3", status="Open")]
    api = PagedAPI([page(raw)])
    service = IssueService(_store(), api_factory=factory_for(api))
    support = service.fetch_support_report("type = Support")
    assert support.total == 3
    assert support.status_counts == {"Open": 2, "Done": 1}
    assert api.session.calls[0]["body"]["fields"] == ["status", "key", "summary"]


def test_dashboard_survives_support_failure():
    tickets_api = PagedAPI([page([issue("PROJ-1", status="Done")])])
    support_api = PagedAPI([FakeResponse(500, None, reason="Server Error")])
    service = IssueService(_store(), api_factory=factory_for(tickets_api, support_api))
    result = service.fetch_dashboard("x", "type = Support")
    assert result.tickets.total_tickets == 1
    assert result.support is None


def test_dashboard_without_support_query():
    service = IssueService(_store(), api_factory=factory_for(PagedAPI([page([])])))
    result = service.fetch_dashboard("x")
    assert result.support is None


def test_test_connection():
    api = PagedAPI([], me={"displayName": "Ada Lovelace"})
    factory = factory_for(api)
    service = IssueService(CredentialStore(), api_factory=factory)
    result = service.test_connection("https://x.net", "a@x.net", "tok")
    assert result.success is True
    assert result.message == "Connected successfully as Ada Lovelace"
    assert factory.seen == [("https://x.net", "a@x.net", "tok")]
    assert not service.store.is_configured()


def test_test_connection_requires_all_fields():
    service = IssueService(CredentialStore(), api_factory=factory_for())
    with pytest.raises(CredentialsNotConfiguredError, match="All credentials are required"):
        service.test_connection("https://x.net", "", "tok")


def test_dashboard_survives_non_json_support_page():
    tickets_api = PagedAPI([page([issue("PROJ-1", status="Done")])])
    support_api = PagedAPI([HtmlResponse(200)])
    service = IssueService(_store(), api_factory=factory_for(tickets_api, support_api))
    result = service.fetch_dashboard("x", "type = Support")
    assert result.tickets.total_tickets == 1
    assert result.support is None


def test_non_json_primary_page_raises_api_error():
    service = IssueService(_store(), api_factory=factory_for(PagedAPI([HtmlResponse(200)])))
    with pytest.raises(JiraAPIError, match="invalid JSON"):
        service.fetch_ticket_report("x")
