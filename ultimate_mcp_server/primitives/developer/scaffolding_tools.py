"""Scaffolding tools - REST endpoint maps, SQL statements and .env templates."""
from typing import Any

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .. import _runtime
from .._helpers import iso_string, num_str
from . import CATEGORY


@Tool(
    "api_endpoint_generator",
    CATEGORY,
    "Generate RESTful API endpoint structure",
    {
        "type": "object",
        "properties": {
            "resource": {"type": "string", "description": "Resource name e.g. 'users', 'products'"},
            "base_url": {"type": "string", "default": "https://api.example.com/v1"},
            "include_auth": {"type": "boolean", "default": True},
        },
        "required": ["resource"],
    },
)
def api_endpoint_generator(
    resource: str,
    base_url: str = "https://api.example.com/v1",
    include_auth: bool = True,
) -> dict[str, Any]:
    """CRUD endpoint map for a plural resource name ("users" -> "user")."""
    plural = resource.lower()
    singular = plural[:-1]
    collection = f"{base_url}/{plural}"
    item = f"{collection}/{{id}}"

    def endpoint(method: str, url: str, description: str, **extra: Any) -> dict[str, Any]:
        entry: dict[str, Any] = {"method": method, "url": url, "description": description}
        if include_auth:
            entry["headers"] = {"Authorization": "Bearer {token}"}
        entry.update(extra)
        return entry

    return {
        "resource": resource,
        "endpoints": [
            endpoint("GET", collection, f"List all {plural}", query_params=["page", "limit", "sort", "filter"]),
            endpoint("POST", collection, f"Create a new {singular}", body=f"{{{singular} object}}"),
            endpoint("GET", item, f"Get a specific {singular}"),
            endpoint("PUT", item, f"Update a {singular} (full)", body=f"{{{singular} object}}"),
            endpoint("PATCH", item, f"Partially update a {singular}", body=f"{{partial {singular} fields}}"),
            endpoint("DELETE", item, f"Delete a {singular}"),
        ],
        "openapi_tag": resource[:1].upper() + resource[1:],
    }


QUERY_TYPES = ("select", "insert", "update", "delete", "create_table")


def _sql_literal(value: Any) -> str:
    if isinstance(value, str):
        return f"'{value}'"
    if value is None:
        return "NULL"
    return num_str(value)


def _where(conditions: str | None) -> str:
    return f"\nWHERE {conditions}" if conditions else ""


@Tool(
    "sql_query_builder",
    CATEGORY,
    "Build common SQL queries",
    {
        "type": "object",
        "properties": {
            "query_type": {"type": "string", "enum": list(QUERY_TYPES)},
            "table": {"type": "string"},
            "columns": {"type": "array", "items": {"type": "string"}},
            "conditions": {"type": "string"},
            "values": {"type": "object"},
        },
        "required": ["query_type", "table"],
    },
)
def sql_query_builder(
    query_type: str,
    table: str,
    columns: list[str] | None = None,
    conditions: str | None = None,
    values: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Template SQL text. Values are quoted, not escaped; this is not a query API."""
    columns = columns or ["*"]
    values = values or {}

    match query_type:
        case "select":
            query = f"SELECT {', '.join(columns)}\nFROM {table}{_where(conditions)};"
        case "insert":
            names = ", ".join(values)
            literals = ", ".join(_sql_literal(v) for v in values.values())
            query = f"INSERT INTO {table} ({names})\nVALUES ({literals});"
        case "update":
            assignments = ", ".join(f"{k} = {_sql_literal(v)}" for k, v in values.items())
            query = f"UPDATE {table}\nSET {assignments}{_where(conditions)};"
        case "delete":
            query = f"DELETE FROM {table}{_where(conditions)};"
        case "create_table":
            definitions = [
                "id SERIAL PRIMARY KEY",
                *(f"{c} VARCHAR(255)" for c in columns if c != "*"),
                "created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP",
            ]
            query = f"CREATE TABLE IF NOT EXISTS {table} (\n  " + ",\n  ".join(definitions) + "\n);"
        case _:
            raise HandlerError(
                f"Unknown query type: {query_type}",
                hint=f"Use one of: {', '.join(QUERY_TYPES)}",
            )

    warning = None
    if query_type == "delete" and not conditions:
        warning = "⚠️ No WHERE clause - this will delete ALL rows!"
    return {"query": query, "query_type": query_type, "table": table, "warning": warning}


@Tool(
    "environment_variable_generator",
    CATEGORY,
    "Generate .env file template from a list of variables",
    {
        "type": "object",
        "properties": {
            "app_name": {"type": "string"},
            "variables": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "description": {"type": "string"},
                        "default_value": {"type": "string"},
                        "required": {"type": "boolean"},
                    },
                },
            },
            "environments": {
                "type": "array",
                "items": {"type": "string"},
                "default": ["development", "production"],
            },
        },
        "required": ["app_name", "variables"],
    },
)
def environment_variable_generator(
    app_name: str,
    variables: list[dict[str, Any]],
    environments: list[str] | None = None,
) -> dict[str, Any]:
    if environments is None:
        environments = ["development", "production"]

    entries = []
    for var in variables:
        name = var.get("name", "")
        comment = var.get("description") or name
        if var.get("required"):
            comment += " (REQUIRED)"
        entries.append(f"# {comment}\n{name}={var.get('default_value') or ''}")

    header = f"# {app_name} Environment Variables\n# Generated: {iso_string(_runtime.utc_now())}\n\n"
    return {
        "app_name": app_name,
        "env_file": header + "\n\n".join(entries),
        "variable_count": len(variables),
        "environments": environments,
    }
