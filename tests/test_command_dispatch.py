"""
Tests for argument classification (core/services/command_dispatch.py)
"""

import pytest
from pydantic import ValidationError

from core.domain.command import Command
from core.services.command_dispatch import (
    CODE_GREETING,
    DOCS_GREETING,
    USAGE_MESSAGE,
    classify,
    greeting_for,
)


class TestClassify:
    """classify() looks at the first token and the first -q pair only"""

    def test_no_tokens_is_unrecognized(self):
        request = classify([])
        assert request.command is Command.UNRECOGNIZED
        assert request.query is None

    def test_code(self):
        assert classify(["code"]).command is Command.CODE

    def test_code_ignores_query_flag(self):
        request = classify(["code", "-q", "ignored"])
        assert request.command is Command.CODE
        assert request.query is None

    def test_docs_without_flag(self):
        request = classify(["docs"])
        assert request.command is Command.DOCS
        assert request.query is None

    def test_docs_with_query(self):
        request = classify(["docs", "-q", "azure functions"])
        assert request.command is Command.DOCS
        assert request.query == "azure functions"

    def test_docs_flag_without_value(self):
        assert classify(["docs", "-q"]).query is None

    def test_docs_flag_with_empty_value(self):
        assert classify(["docs", "-q", ""]).query is None

    def test_flag_anywhere_after_docs(self):
        assert classify(["docs", "extra", "-q", "blob storage"]).query == "blob storage"

    def test_first_flag_wins(self):
        assert classify(["docs", "-q", "first", "-q", "second"]).query == "first"

    def test_flag_like_query_is_verbatim(self):
        assert classify(["docs", "-q", "-q"]).query == "-q"
        assert classify(["docs", "-q", "--help"]).query == "--help"

    def test_trailing_tokens_do_not_change_classification(self):
        base = classify(["docs", "-q", "cosmos"])
        noisy = classify(["docs", "-q", "cosmos", "code", "-x", "more"])
        assert noisy == base

    def test_flag_is_not_the_first_token(self):
        request = classify(["-q", "docs"])
        assert request.command is Command.UNRECOGNIZED
        assert request.query is None

    @pytest.mark.parametrize("token", ["Docs", "CODE", "doc", "anotherparam", "--help", ""])
    def test_other_first_tokens_are_unrecognized(self, token):
        assert classify([token]).command is Command.UNRECOGNIZED

    def test_request_is_immutable(self):
        request = classify(["docs", "-q", "x"])
        with pytest.raises(ValidationError):
            request.query = "y"


class TestGreetingFor:
    """greeting_for() picks the local output or None for a remote search"""

    def test_code_greeting(self):
        assert greeting_for(classify(["code"])) == CODE_GREETING == "hello code"

    def test_docs_greeting(self):
        assert greeting_for(classify(["docs"])) == DOCS_GREETING == "hello docs"
        assert greeting_for(classify(["docs", "-q"])) == "hello docs"

    def test_usage(self):
        assert greeting_for(classify([])) == USAGE_MESSAGE
        assert USAGE_MESSAGE == "Please provide a first parameter: 'docs' or 'code'"

    def test_query_delegates_to_remote_search(self):
        assert greeting_for(classify(["docs", "-q", "aks"])) is None
