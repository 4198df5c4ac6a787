"""
Tests for the partial-update SET clause builder.
"""

import pytest

from jobly.core.errors import BadRequestError
from jobly.helpers.sql import PartialUpdate, sql_for_partial_update


class TestSqlForPartialUpdate:

    def test_one_item_with_alias(self):
        result = sql_for_partial_update({"a": 1}, {"a": "a_col"})

        assert result == PartialUpdate(set_cols='"a_col"=$1', values=(1,))

    def test_multiple_items_without_alias(self):
        result = sql_for_partial_update({"a": 1, "b": 2}, {})

        assert result.set_cols == '"a"=$1, "b"=$2'
        assert result.values == (1, 2)

    def test_mixed_aliases_keep_insertion_order(self):
        result = sql_for_partial_update(
            {"firstName": "Aliya", "age": 32},
            {"firstName": "first_name"}
        )

        assert result.set_cols == '"first_name"=$1, "age"=$2'
        assert result.values == ("Aliya", 32)

    def test_none_values_are_kept(self):
        result = sql_for_partial_update({"salary": None}, {})

        assert result.set_cols == '"salary"=$1'
        assert result.values == (None,)

    def test_empty_data_is_rejected(self):
        with pytest.raises(BadRequestError) as exc_info:
            sql_for_partial_update({}, {"a": "a_col"})

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "No data"

    def test_allowed_columns_accepts_known_columns(self):
        result = sql_for_partial_update(
            {"title": "x", "salary": 5}, {}, allowed_columns={"title", "salary"}
        )

        assert result.values == ("x", 5)

    def test_allowed_columns_checks_resolved_name(self):
        result = sql_for_partial_update(
            {"companyHandle": "c1"},
            {"companyHandle": "company_handle"},
            allowed_columns={"company_handle"}
        )

        assert result.set_cols == '"company_handle"=$1'

    def test_column_outside_allow_list_is_rejected(self):
        with pytest.raises(BadRequestError):
            sql_for_partial_update(
                {'title"=1; --': "x"}, {}, allowed_columns={"title"}
            )

    def test_result_is_immutable(self):
        result = sql_for_partial_update({"a": 1}, {})

        with pytest.raises(AttributeError):
            result.set_cols = '"b"=$1'
