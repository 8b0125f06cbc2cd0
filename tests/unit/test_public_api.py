"""Smoke test for the top-level package exports."""

import bulk_queries


def test_top_level_exports_generate_statements():
    rows = [{"Id": 1, "Text": "new"}, {"Id": 2, "Text": "newer"}]

    inserts = bulk_queries.generate_insert_batches(
        bulk_queries.DatabaseEngine.POSTGRES,
        "T",
        rows,
        ["Id", "Text"],
        on_conflict=bulk_queries.ConflictPolicy.DO_NOTHING,
    )
    update = bulk_queries.generate_update("postgresql", "T", rows, ["Id"], ["Text"])
    delete = bulk_queries.generate_delete("T", "Id", [3, 4], param_prefix="del_")

    assert inserts[0].sql == (
        "INSERT INTO T (Id,Text) VALUES (@Id_0,@Text_0),(@Id_1,@Text_1) "
        "ON CONFLICT DO NOTHING;"
    )
    assert update.sql.count("UPDATE T SET Text = ") == 2
    assert isinstance(delete.parameters, bulk_queries.ParameterSet)
    assert bulk_queries.__version__ == "0.1.0"
