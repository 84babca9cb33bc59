"""
Unit tests for response interpretation.
"""

import logging
from unittest.mock import Mock

import pytest

from xapi_sdk import (
    ClientError,
    ResourceNotFoundError,
    interpret_add,
    interpret_get,
    interpret_list,
)

from conftest import make_response


class TestInterpretGet:
    """Test GET by id interpretation."""

    def test_single_object(self):
        """Test a single-object body is returned unchanged."""
        response = make_response(200, {"id": 42, "nome": "S.r.l."})

        assert interpret_get(response, "contatti", "42") == {"id": 42, "nome": "S.r.l."}

    def test_collection_returns_first(self):
        """Test a collection body returns only its first element."""
        response = make_response(200, [{"id": 1}, {"id": 2}])

        assert interpret_get(response, "contatti", "1") == {"id": 1}

    def test_empty_collection(self):
        """Test an empty collection is reported as not found."""
        response = make_response(200, [])

        with pytest.raises(ResourceNotFoundError) as exc_info:
            interpret_get(response, "contatti", "42")

        assert exc_info.value.resource_name == "contatti"
        assert exc_info.value.resource_id == "42"
        assert exc_info.value.operation == "get"
        assert "not found" in str(exc_info.value)

    def test_empty_body(self):
        """Test an empty body is reported as not found."""
        with pytest.raises(ResourceNotFoundError):
            interpret_get(make_response(200), "contatti", "42")

    def test_not_found_is_client_error(self):
        """Test ResourceNotFoundError is a ClientError."""
        with pytest.raises(ClientError):
            interpret_get(make_response(200, []), "contatti", "42")

    @pytest.mark.parametrize("status", [201, 400, 401, 404, 500])
    def test_unexpected_status(self, status):
        """Test any status other than 200 fails."""
        response = make_response(status, raw="boom")

        with pytest.raises(ClientError) as exc_info:
            interpret_get(response, "contatti", "42")

        error = exc_info.value
        assert not isinstance(error, ResourceNotFoundError)
        assert error.status_code == status
        assert error.raw_body == "boom"
        assert error.resource_name == "contatti"
        assert error.operation == "get"
        assert "[boom]" in str(error)

    def test_invalid_json(self):
        """Test an undecodable success body fails with the raw body."""
        with pytest.raises(ClientError) as exc_info:
            interpret_get(make_response(200, raw="<html>"), "contatti", "42")

        assert exc_info.value.raw_body == "<html>"


class TestInterpretAdd:
    """Test POST interpretation."""

    def test_created(self):
        """Test body is returned as-is."""
        response = make_response(201, {"id": 7, "nome": "S.p.A."})

        assert interpret_add(response, "natureGiuridiche") == {"id": 7, "nome": "S.p.A."}

    def test_created_collection_not_unwrapped(self):
        """Test no collection unwrapping happens on add."""
        response = make_response(201, [{"id": 7}])

        assert interpret_add(response, "natureGiuridiche") == [{"id": 7}]

    @pytest.mark.parametrize("status", [200, 400, 409, 500])
    def test_unexpected_status(self, status):
        """Test any status other than 201 fails."""
        with pytest.raises(ClientError) as exc_info:
            interpret_add(make_response(status, {"error": "bad"}), "natureGiuridiche")

        assert exc_info.value.operation == "add"
        assert exc_info.value.status_code == status

    def test_empty_body(self):
        """Test an empty creation body fails."""
        with pytest.raises(ClientError):
            interpret_add(make_response(201), "natureGiuridiche")


class TestInterpretList:
    """Test GET list interpretation."""

    def test_collection(self):
        """Test elements are returned in server order."""
        body = [{"id": 3}, {"id": 1}, {"id": 2}]

        assert interpret_list(make_response(200, body), "contatti") == body

    def test_empty_collection(self):
        """Test an empty collection is not an error."""
        assert interpret_list(make_response(200, []), "contatti") == []

    def test_empty_body(self):
        """Test an empty body is an empty list."""
        assert interpret_list(make_response(200), "contatti") == []

    def test_single_object(self):
        """Test a single object becomes a one-element list."""
        assert interpret_list(make_response(200, {"id": 1}), "contatti") == [{"id": 1}]

    def test_unexpected_status(self):
        """Test any status other than 200 fails."""
        with pytest.raises(ClientError) as exc_info:
            interpret_list(make_response(503, raw="down"), "contatti")

        assert exc_info.value.operation == "list"
        assert exc_info.value.raw_body == "down"


class TestErrorLogging:
    """Test failures are logged before being raised."""

    @pytest.fixture
    def logger(self):
        return Mock(spec=logging.Logger)

    def test_status_error_logged(self, logger):
        """Test status errors are logged at error level with the exception."""
        with pytest.raises(ClientError) as exc_info:
            interpret_get(make_response(404, raw="missing"), "contatti", "42", logger)

        logger.error.assert_called_once()
        args, kwargs = logger.error.call_args
        assert args[0] == 'Error trying to get resource'
        assert kwargs['exc_info'] is exc_info.value

    def test_not_found_logged(self, logger):
        """Test not-found errors are logged."""
        with pytest.raises(ResourceNotFoundError):
            interpret_get(make_response(200, []), "contatti", "42", logger)

        assert logger.error.call_args[0][0] == 'Cannot find resource'

    def test_success_not_logged(self, logger):
        """Test nothing is logged at error level on success."""
        interpret_list(make_response(200, []), "contatti", logger)

        logger.error.assert_not_called()


class TestPayloadShape:
    """Test the interpreters only apply the unwrapping policy."""

    def test_list_keeps_non_object_elements(self):
        """Test elements are returned without shape checks."""
        response = make_response(200, [{"id": 1}, None, 3])

        assert interpret_list(response, "contatti") == [{"id": 1}, None, 3]

    def test_get_returns_scalar_first_element(self):
        """Test a scalar first element is returned as decoded."""
        assert interpret_get(make_response(200, [42]), "contatti", "1") == 42
