"""Tests for response parsers."""

import pytest

from ebay_finding.errors import ServiceFailureError
from ebay_finding.finding.models import Pagination, SearchResult, parse_int
from ebay_finding.finding.parsers import parse_search_response, parse_version_response


def _body(**fields):
    body = {
        "ack": "Success",
        "version": "1.13.0",
        "timestamp": "2024-03-01T12:00:00.000Z",
        "itemSearchURL": "https://www.ebay.com/sch/i.html",
    }
    body.update(fields)
    return body


class TestParseSearchResponse:

    def test_single_item_becomes_list(self):
        body = _body(searchResult={"@count": "1", "item": {"itemId": "110"}})
        result = parse_search_response(body)
        assert isinstance(result, SearchResult)
        assert result.search_result == [{"itemId": "110"}]
        assert result.search_result_count == 1

    def test_multiple_items_normalized_individually(self):
        body = _body(searchResult={
            "@count": "2",
            "item": [
                {"itemId": ["1"], "title": ["One"]},
                {"itemId": ["2"], "title": ["Two"]},
            ],
        })
        result = parse_search_response(body)
        assert result.search_result == [
            {"itemId": "1", "title": "One"},
            {"itemId": "2", "title": "Two"},
        ]
        assert result.search_result_count == 2

    def test_search_result_absent(self):
        result = parse_search_response(_body())
        assert result.search_result == []
        assert result.search_result_count == 0

    def test_no_items(self):
        result = parse_search_response(_body(searchResult={"@count": "0"}))
        assert result.search_result == []
        assert result.search_result_count == 0

    def test_unparseable_count(self):
        body = _body(searchResult={"@count": "many", "item": {"itemId": "1"}})
        assert parse_search_response(body).search_result_count == 0

    def test_negative_count_clamped(self):
        body = _body(searchResult={"@count": "-3"})
        assert parse_search_response(body).search_result_count == 0

    def test_empty_item_kept(self):
        body = _body(searchResult={"@count": "1", "item": {}})
        assert parse_search_response(body).search_result == [{}]

    def test_null_item_treated_as_absent(self):
        body = _body(searchResult={"@count": "0", "item": None})
        assert parse_search_response(body).search_result == []

    def test_envelope_fields(self):
        body = _body(paginationOutput={
            "pageNumber": "2",
            "entriesPerPage": "10",
            "totalPages": "5",
            "totalEntries": "47",
        })
        result = parse_search_response(body)
        assert result.ack == "Success"
        assert result.version == "1.13.0"
        assert result.timestamp == "2024-03-01T12:00:00.000Z"
        assert result.item_search_url == "https://www.ebay.com/sch/i.html"
        assert result.pagination_output == Pagination(2, 10, 5, 47)

    def test_pagination_absent(self):
        assert parse_search_response(_body()).pagination_output is None

    def test_failure_raises_with_body(self):
        body = _body(
            ack="Failure",
            searchResult={"@count": "1", "item": {"itemId": "1"}},
            errorMessage={"error": {"errorId": "41", "message": "Invalid product ID value."}},
        )
        with pytest.raises(ServiceFailureError) as exc_info:
            parse_search_response(body, operation="findItemsByProduct")
        error = exc_info.value
        assert error.ack == "Failure"
        assert error.operation == "findItemsByProduct"
        assert error.response["searchResult"]["item"] == [{"itemId": "1"}]
        assert "Invalid product ID value." in str(error)

    def test_warning_ack_is_not_failure(self):
        assert parse_search_response(_body(ack="Warning")).ack == "Warning"

    def test_body_not_mutated(self):
        body = _body(searchResult={"@count": "1", "item": {"itemId": "1"}})
        parse_search_response(body)
        assert body["searchResult"]["item"] == {"itemId": "1"}

    def test_to_dict(self):
        body = _body(
            searchResult={"@count": "1", "item": {"itemId": "1"}},
            paginationOutput={"pageNumber": "1", "entriesPerPage": "100",
                              "totalPages": "1", "totalEntries": "1"},
        )
        record = parse_search_response(body).to_dict()
        assert record["searchResultCount"] == 1
        assert record["searchResult"] == [{"itemId": "1"}]
        assert record["itemSearchUrl"] == "https://www.ebay.com/sch/i.html"
        assert record["paginationOutput"] == {
            "pageNumber": 1,
            "entriesPerPage": 100,
            "totalPages": 1,
            "totalEntries": 1,
        }


class TestParseVersionResponse:

    def test_success(self):
        result = parse_version_response(_body())
        assert result.version == "1.13.0"
        assert result.ack == "Success"

    def test_failure(self):
        with pytest.raises(ServiceFailureError):
            parse_version_response(_body(ack="Failure"), operation="getVersion")


class TestParseInt:

    def test_values(self):
        assert parse_int("42") == 42
        assert parse_int(" 7 ") == 7
        assert parse_int(None) == 0
        assert parse_int("abc") == 0

    def test_negative_falls_back_to_default(self):
        assert parse_int("-3") == 0
        assert parse_int("-1", default=5) == 5
