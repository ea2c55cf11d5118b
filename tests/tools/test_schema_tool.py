"""Test the schema tool and its JSON document shape."""

import asyncio

from sqlgate.adapters._base import (
    AdapterExecutionError,
    ColumnInfo,
    Relationship,
    SchemaMetadata,
    TableInfo,
)
from sqlgate.tools import ErrorType, ToolFailure, schema_tool
from sqlgate.tools.schema import schema_to_dict


def test_describes_tables(shop):
    doc = asyncio.run(schema_tool(shop))
    assert [t["tableName"] for t in doc["tables"]] == ["orders", "users"]
    users = doc["tables"][1]
    assert users["columns"][0] == {
        "name": "id",
        "type": "INTEGER",
        "nullable": True,
        "key": None,
        "default": None,
        "extra": None,
    }


def test_filters(shop):
    doc = asyncio.run(schema_tool(shop, table_name="orders"))
    assert [t["tableName"] for t in doc["tables"]] == ["orders"]
    doc = asyncio.run(schema_tool(shop, keyword="user"))
    assert [t["tableName"] for t in doc["tables"]] == ["users"]


def test_relationships_camel_case():
    meta = SchemaMetadata(
        tables=[TableInfo(schema=None, name="orders", columns=[ColumnInfo("user_id", "int")])],
        relationships=[Relationship("orders", "user_id", "users", "id", "fk_orders_user")],
    )
    doc = schema_to_dict(meta)
    assert doc["relationships"] == [
        {
            "table": "orders",
            "column": "user_id",
            "referencedTable": "users",
            "referencedColumn": "id",
            "constraintName": "fk_orders_user",
        }
    ]


def test_relationships_omitted_when_empty():
    assert schema_to_dict(SchemaMetadata()) == {"tables": []}


def test_not_connected(fake_adapter):
    result = asyncio.run(schema_tool(fake_adapter(connected=False)))
    assert result == ToolFailure(ErrorType.VALIDATION_ERROR, "Database is not connected")


def test_execution_error(fake_adapter):
    result = asyncio.run(schema_tool(fake_adapter(AdapterExecutionError("no access"))))
    assert isinstance(result, ToolFailure)
    assert result.error_type == ErrorType.QUERY_EXECUTION_ERROR
    assert result.message == "no access"
