import logging

import pytest
from fastapi import HTTPException

from exceptions import InvalidGroupingError
from utils.error_handlers import handle_api_errors
from utils.logging_utils import log_operation


class _Tables:
    @log_operation("create_table_group")
    def create_table_group(self, table_group_id=None):
        raise InvalidGroupingError("too few tables", [1])

    @log_operation("ungroup_table_group")
    def ungroup(self, table_group_id):
        return table_group_id


def test_rejected_operation_is_logged_once_as_warning(caplog):
    @handle_api_errors("Table group creation")
    def route():
        return _Tables().create_table_group(table_group_id=3)

    with caplog.at_level(logging.DEBUG):
        with pytest.raises(HTTPException):
            route()

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "too few tables" in warnings[0].getMessage()

    rejected = [r for r in caplog.records if r.getMessage().startswith("Rejected create_table_group")]
    assert len(rejected) == 1
    assert rejected[0].levelno == logging.DEBUG
    assert rejected[0].table_group_id == 3
    assert rejected[0].error_type == "InvalidGroupingError"


def test_completed_operation_logs_info_with_context(caplog):
    with caplog.at_level(logging.INFO):
        assert _Tables().ungroup(table_group_id=5) == 5

    completed = [r for r in caplog.records if r.getMessage() == "Completed ungroup_table_group"]
    assert len(completed) == 1
    assert completed[0].table_group_id == 5
    assert completed[0].operation == "ungroup_table_group"
