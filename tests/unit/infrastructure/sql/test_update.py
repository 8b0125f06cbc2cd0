"""
Unit tests for the per-row UPDATE generator.
"""

import math

import pytest

from bulk_queries.infrastructure.sql import (
    DatabaseEngine,
    InvalidArgumentError,
    UnknownColumnError,
    generate_update,
    generate_update_statements,
)


class TestUpdateText:
    """Tests for the generated UPDATE script."""

    def test_postgres_with_transaction(self, text_rows):
        sql, params = generate_update(
            DatabaseEngine.POSTGRES, "T", text_rows[:2], ["Id"], ["Text"]
        )

        assert sql == (
            "BEGIN;\n"
            "UPDATE T SET Text = @Text_0 WHERE Id = @Id_0;\n"
            "UPDATE T SET Text = @Text_1 WHERE Id = @Id_1;\n"
            "COMMIT;"
        )
        assert params == {"Text_0": "aaa", "Id_0": 1, "Text_1": "bbb", "Id_1": 2}

    def test_sqlserver_transaction_literals(self, text_rows):
        sql, _ = generate_update(DatabaseEngine.SQLSERVER, "T", text_rows, ["Id"], ["Text"])
        assert sql.startswith("BEGIN TRANSACTION;\n")
        assert sql.endswith("\nCOMMIT;")

    def test_without_transaction(self, text_rows):
        sql, _ = generate_update("postgresql", "T", text_rows, ["Id"], ["Text"], use_transaction=False)
        assert "BEGIN" not in sql
        assert "COMMIT" not in sql
        assert sql.splitlines()[0] == "UPDATE T SET Text = @Text_0 WHERE Id = @Id_0;"

    def test_one_update_per_row(self, sample_records):
        sql, params = generate_update(
            "postgresql",
            "TestTable",
            sample_records,
            ["Id"],
            ["TextCol", "NumberCol", "BoolCol"],
            use_transaction=False,
        )
        lines = sql.splitlines()
        assert len(lines) == len(sample_records)
        assert lines[2] == (
            "UPDATE TestTable SET TextCol = @TextCol_2, NumberCol = @NumberCol_2, "
            "BoolCol = @BoolCol_2 WHERE Id = @Id_2;"
        )
        assert len(params) == 4 * len(sample_records)

    def test_composite_selector(self):
        rows = [{"Tenant": "a", "Id": 1, "Text": "x"}]
        sql, params = generate_update(
            "postgresql", "T", rows, ["Tenant", "Id"], ["Text"], use_transaction=False
        )
        assert sql == "UPDATE T SET Text = @Text_0 WHERE Tenant = @Tenant_0 AND Id = @Id_0;"
        assert params == {"Text_0": "x", "Tenant_0": "a", "Id_0": 1}

    def test_row_index_is_global(self):
        rows = [{"Id": i, "Text": str(i)} for i in range(150)]
        sql, params = generate_update("postgresql", "T", rows, ["Id"], ["Text"])
        assert "@Text_149" in sql
        assert params["Id_149"] == 149
        assert sql.count("UPDATE T SET") == 150

    def test_param_prefix(self, text_rows):
        sql, params = generate_update(
            "postgresql", "T", text_rows[:1], ["Id"], ["Text"],
            use_transaction=False, param_prefix="upd_",
        )
        assert sql == "UPDATE T SET Text = @upd_Text_0 WHERE Id = @upd_Id_0;"
        assert set(params) == {"upd_Text_0", "upd_Id_0"}

    def test_empty_rows_returns_empty_batch(self):
        sql, params = generate_update("postgresql", "T", [], ["Id"], ["Text"])
        assert sql == ""
        assert len(params) == 0

    def test_deterministic(self, sample_records):
        args = ("sqlserver", "TestTable", sample_records, ["Id"], ["TextCol", "BoolCol"])
        assert generate_update(*args) == generate_update(*args)


class TestUpdateValues:
    """Tests for SET and WHERE value resolution."""

    def test_calculated_value_in_set(self, sample_records):
        _, params = generate_update(
            "postgresql",
            "TestTable",
            sample_records,
            ["Id"],
            ["TextCol"],
            calculated_values={"TextCol": lambda r: r.TextCol * 2},
        )
        assert params["TextCol_0"] == "aaaaaa"

    def test_selector_ignores_calculated_value(self, text_rows):
        _, params = generate_update(
            "postgresql",
            "T",
            text_rows,
            ["Id"],
            ["Text"],
            calculated_values={"Id": lambda r: r["Id"] * 100},
        )
        assert params["Id_0"] == 1
        assert params["Id_2"] == 3

    def test_selector_may_also_be_updated_from_field(self, text_rows):
        sql, params = generate_update(
            "postgresql", "T", text_rows[:1], ["Id"], ["Id", "Text"], use_transaction=False
        )
        assert sql == "UPDATE T SET Id = @Id_0, Text = @Text_0 WHERE Id = @Id_0;"
        assert params == {"Id_0": 1, "Text_0": "aaa"}

    def test_nan_selector_that_is_also_updated(self):
        rows = [{"Id": float("nan"), "Text": "x"}]

        sql, params = generate_update(
            "postgresql", "T", rows, ["Id"], ["Id", "Text"], use_transaction=False
        )

        assert sql == "UPDATE T SET Id = @Id_0, Text = @Text_0 WHERE Id = @Id_0;"
        assert math.isnan(params["Id_0"])

    def test_selector_missing_from_row_raises(self):
        rows = [{"Text": "aaa"}]
        with pytest.raises(UnknownColumnError) as exc_info:
            generate_update(
                "postgresql", "T", rows, ["Id"], ["Text"],
                calculated_values={"Id": lambda r: 1},
            )
        assert exc_info.value.column == "Id"

    def test_unknown_update_column_raises(self, text_rows):
        with pytest.raises(UnknownColumnError):
            generate_update("postgresql", "T", text_rows, ["Id"], ["Missing"])


class TestUpdateValidation:
    """Tests for fail-fast validation."""

    def test_no_selector_columns(self, text_rows):
        with pytest.raises(InvalidArgumentError, match="selector"):
            generate_update("postgresql", "T", text_rows, [], ["Text"])

    def test_no_update_columns(self, text_rows):
        with pytest.raises(InvalidArgumentError):
            generate_update("postgresql", "T", text_rows, ["Id"], [])

    def test_no_table(self, text_rows):
        with pytest.raises(InvalidArgumentError, match="table"):
            generate_update("postgresql", "", text_rows, ["Id"], ["Text"])

    def test_validation_runs_before_empty_rows_shortcut(self):
        with pytest.raises(InvalidArgumentError):
            generate_update("postgresql", "T", [], [], ["Text"])

    def test_calculated_selector_that_is_also_updated(self, text_rows):
        with pytest.raises(InvalidArgumentError, match="Id"):
            generate_update(
                "postgresql", "T", text_rows, ["Id"], ["Id", "Text"],
                calculated_values={"Id": lambda r: 0},
            )


class TestUpdateStatements:
    """Tests for the one-batch-per-row form."""

    def test_one_batch_per_row_with_global_indexes(self, text_rows):
        batches = generate_update_statements("sqlite", "T", text_rows, ["Id"], ["Text"])

        assert [b.sql for b in batches] == [
            "UPDATE T SET Text = @Text_0 WHERE Id = @Id_0;",
            "UPDATE T SET Text = @Text_1 WHERE Id = @Id_1;",
            "UPDATE T SET Text = @Text_2 WHERE Id = @Id_2;",
        ]
        assert batches[2].parameters == {"Text_2": "ccc", "Id_2": 3}

    def test_matches_single_script_lines(self, sample_records):
        args = ("postgresql", "TestTable", sample_records, ["Id"], ["TextCol", "BoolCol"])

        script, params = generate_update(*args, use_transaction=False)
        batches = generate_update_statements(*args)

        assert [b.sql for b in batches] == script.splitlines()
        merged = {}
        for batch in batches:
            merged.update(batch.parameters)
        assert merged == params

    def test_no_transaction_literals(self, text_rows):
        batches = generate_update_statements("sqlserver", "T", text_rows, ["Id"], ["Text"])
        assert not any("TRANSACTION" in b.sql or "COMMIT" in b.sql for b in batches)

    def test_empty_rows(self):
        assert generate_update_statements("postgresql", "T", [], ["Id"], ["Text"]) == []

    def test_validates_like_generate_update(self, text_rows):
        with pytest.raises(InvalidArgumentError, match="selector"):
            generate_update_statements("postgresql", "T", text_rows, [], ["Text"])
