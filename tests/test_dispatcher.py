import asyncio
import json

import httpx

from gusto_mcp.models.common import Failure, Success


def test_unknown_tool_fails_without_network_call(dispatcher, upstream):
    result = asyncio.run(dispatcher.invoke("delete_everything", {"company_id": "C1"}))

    assert isinstance(result, Failure)
    assert "delete_everything" in result.message
    assert upstream.requests == []


def test_get_employee_success(dispatcher, upstream):
    upstream.reply_json({"id": "abc-123"})

    result = asyncio.run(dispatcher.invoke("get_employee", {"employee_id": "abc-123"}))

    assert result == Success(payload={"id": "abc-123"})
    assert len(upstream.requests) == 1
    assert upstream.last.method == "GET"
    assert upstream.last.url.path == "/v1/employees/abc-123"
    assert upstream.last.headers["Authorization"] == "Bearer test-token-123"


def test_list_payrolls_omits_absent_filters(dispatcher, upstream):
    upstream.reply_json([])

    asyncio.run(dispatcher.invoke(
        "list_payrolls", {"company_id": "C1", "processed": True, "start_date": "2024-01-01"}
    ))

    params = upstream.last.url.params
    assert upstream.last.url.path == "/v1/companies/C1/payrolls"
    assert params["processed"] == "true"
    assert params["start_date"] == "2024-01-01"
    assert "end_date" not in params


def test_upstream_error_is_passed_through(dispatcher, upstream):
    upstream.reply_text("invalid", status_code=422)

    result = asyncio.run(dispatcher.invoke("get_company", {"company_id": "C1"}))

    assert isinstance(result, Failure)
    assert "422" in result.message
    assert "invalid" in result.message


def test_transport_error_becomes_failure(client, upstream, dispatcher):
    def refuse(request):
        raise httpx.ConnectError("name resolution failed", request=request)

    upstream.responder = refuse

    result = asyncio.run(dispatcher.invoke("list_benefits", {"company_id": "C1"}))

    assert isinstance(result, Failure)
    assert "name resolution failed" in result.message


def test_non_json_success_body_becomes_failure(dispatcher, upstream):
    upstream.responder = lambda request: httpx.Response(200, text="<html>maintenance</html>")

    result = asyncio.run(dispatcher.invoke("get_company", {"company_id": "C1"}))

    assert isinstance(result, Failure)


def test_repeated_call_is_idempotent(dispatcher, upstream):
    upstream.reply_json({"id": "C1", "name": "Acme", "locations": [{"city": "Denver"}]})

    async def twice():
        first = await dispatcher.invoke("get_company", {"company_id": "C1"})
        second = await dispatcher.invoke("get_company", {"company_id": "C1"})
        return first, second

    first, second = asyncio.run(twice())

    assert isinstance(first, Success)
    assert first == second
    assert len(upstream.requests) == 2


def test_extra_arguments_are_ignored(dispatcher, upstream):
    asyncio.run(dispatcher.invoke("get_company", {"company_id": "C1", "include": "everything", "page": 4}))

    assert str(upstream.last.url) == "https://api.gusto.test/v1/companies/C1"


def test_missing_required_argument_reaches_upstream(dispatcher, upstream):
    upstream.reply_text('{"errors": "company not found"}', status_code=404)

    result = asyncio.run(dispatcher.invoke("get_company", {}))

    assert upstream.last.url.path == "/v1/companies/None"
    assert isinstance(result, Failure)
    assert "404" in result.message


def test_pagination_is_passed_through(dispatcher, upstream):
    asyncio.run(dispatcher.invoke("list_contractors", {"company_id": "C1", "page": 3, "per": 100.0}))

    assert upstream.last.url.params["page"] == "3"
    assert upstream.last.url.params["per"] == "100"


def test_call_tool_renders_success_as_pretty_json(dispatcher, upstream):
    upstream.reply_json({"id": "abc-123", "first_name": "Ana"})

    text, is_error = asyncio.run(dispatcher.call_tool("get_employee", {"employee_id": "abc-123"}))

    assert is_error is False
    assert text == json.dumps({"id": "abc-123", "first_name": "Ana"}, indent=2)


def test_call_tool_renders_failure_with_prefix(dispatcher):
    text, is_error = asyncio.run(dispatcher.call_tool("delete_everything"))

    assert is_error is True
    assert text == "Error: Unknown tool: delete_everything"
