"""
Notes API: Error Type Unit Tests
==================================
"""

import pytest

from notes_api.exceptions import (
    AppError,
    NotFoundError,
    RouteNotFoundError,
    ValidationError,
    as_app_error,
)


class TestAppError:

    def test_defaults(self):
        error = AppError()
        assert error.status == 500
        assert error.message == "Internal Server Error"
        assert str(error) == "Internal Server Error"

    def test_explicit_status(self):
        error = AppError("Teapot", status=418)
        assert (error.message, error.status) == ("Teapot", 418)

    def test_subclass_statuses(self):
        assert NotFoundError("Note not found").status == 404
        assert ValidationError("title and body required").status == 400

    def test_message_and_status_are_read_only(self):
        error = NotFoundError("Note not found")
        with pytest.raises(AttributeError):
            error.status = 500
        with pytest.raises(AttributeError):
            error.message = "changed"

    def test_context_is_read_only(self):
        error = AppError("x", context={"a": 1})
        with pytest.raises(TypeError):
            error.context["a"] = 2

    def test_context_is_copied(self):
        ctx = {"a": 1}
        error = AppError("x", context=ctx)
        ctx["a"] = 2
        assert error.context["a"] == 1

    def test_reraising_keeps_contents(self):
        original = NotFoundError("Note not found")
        try:
            try:
                raise original
            except NotFoundError:
                raise
        except NotFoundError as caught:
            assert caught is original
            assert (caught.message, caught.status) == ("Note not found", 404)

    def test_route_not_found_message(self):
        error = RouteNotFoundError("TRACE", "/nowhere")
        assert isinstance(error, NotFoundError)
        assert (error.message, error.status) == ("Route not found: TRACE /nowhere", 404)
        assert error.context["method"] == "TRACE"

    def test_validation_error_field(self):
        error = ValidationError("title and body required", field="title")
        assert error.field == "title"
        assert error.context["field"] == "title"


class TestAsAppError:

    def test_app_error_passes_through(self):
        error = NotFoundError("gone")
        assert as_app_error(error) is error

    def test_plain_exception_becomes_500(self):
        error = as_app_error(RuntimeError("Something went wrong"))
        assert type(error) is AppError
        assert error.status == 500
        assert error.message == "Something went wrong"
        assert error.context["original_error"] == "RuntimeError"

    def test_empty_message_falls_back(self):
        assert as_app_error(ValueError()).message == "Internal Server Error"

    def test_borrows_status_attribute(self):
        fault = RuntimeError("Slow down")
        fault.status = 429
        assert as_app_error(fault).status == 429

    @pytest.mark.parametrize("bad_status", ["404", 200, 99, 700, True, None])
    def test_ignores_unusable_status(self, bad_status):
        fault = RuntimeError("boom")
        fault.status = bad_status
        assert as_app_error(fault).status == 500
