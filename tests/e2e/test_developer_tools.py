"""Tests for the Developer Tools category."""
from __future__ import annotations

import re

from .helpers import call_tool, tool_error

UUID_V4 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


class TestCodeTools:
    """Tests for regexes, complexity metrics, cron and commit messages."""

    def test_generate_regex(self, client):
        result = call_tool(client, "generate_regex", {"pattern_type": "zip_code"})
        assert result == {"pattern_type": "zip_code", "pattern": r"/^\d{5}(-\d{4})?$/", "description": "US ZIP code"}

    def test_unknown_regex_type(self, client):
        error = tool_error(client, "generate_regex", {"pattern_type": "isbn"})
        assert error["code"] == -32000
        assert "Unknown pattern type: isbn" in error["message"]

    def test_code_complexity(self, client):
        code = "def f(x):\n    # comment\n    if x:\n        return 1\n\n    return 0"
        result = call_tool(client, "code_complexity", {"code": code, "language": "python"})
        assert result == {
            "language": "python",
            "total_lines": 6,
            "code_lines": 4,
            "blank_lines": 1,
            "comment_lines": 1,
            "functions_detected": 1,
            "cyclomatic_complexity": 2,
            "complexity_level": "Low",
            "avg_line_length": 10,
            "recommendation": "Code complexity is acceptable",
        }

    def test_branchy_code_flagged(self, client):
        code = "\n".join(["if (a) {}"] * 12)
        result = call_tool(client, "code_complexity", {"code": code})
        assert result["language"] == "generic"
        assert result["cyclomatic_complexity"] == 13
        assert result["complexity_level"] == "High"
        assert result["recommendation"] == "Consider refactoring complex functions"

    def test_common_cron_schedule(self, client):
        result = call_tool(client, "cron_expression_parser", {"expression": "0 9 * * 1-5"})
        assert result["human_readable"] == "Every weekday at 9 AM"
        assert result["breakdown"] == {
            "minute": "minute 0",
            "hour": "hour 9",
            "day": "Every day",
            "month": "Every month",
            "weekday": "weekdays 1-5",
        }

    def test_cron_explained_field_by_field(self, client):
        result = call_tool(client, "cron_expression_parser", {"expression": "30 2 1 6 0"})
        assert result["human_readable"] == "At minute 30 | hour 2 | day 1 | month 6 (June) | weekday 0 (Sunday)"

    def test_cron_step(self, client):
        result = call_tool(client, "cron_expression_parser", {"expression": "*/15 * * * *"})
        assert result["breakdown"]["minute"] == "Every 15 minutes"

    def test_cron_wrong_field_count(self, client):
        result = call_tool(client, "cron_expression_parser", {"expression": "0 9 * *"})
        assert result == {"error": "Cron must have 5 parts: minute hour day month weekday"}

    def test_commit_message_full(self, client):
        args = {
            "type": "feat",
            "scope": "auth",
            "description": "add login",
            "breaking_change": True,
            "body": "Adds OAuth",
        }
        result = call_tool(client, "git_commit_message", args)
        assert result["header"] == "feat(auth)!: add login"
        assert result["commit_message"] == (
            "feat(auth)!: add login\n\nAdds OAuth\n\nBREAKING CHANGE: This is a breaking change"
        )
        assert result["type_description"] == "New feature"

    def test_commit_message_header_only(self, client):
        result = call_tool(client, "git_commit_message", {"type": "fix", "description": "typo"})
        assert result["commit_message"] == "fix: typo"
        assert result["conventional_commits_compliant"] is True


class TestIdentifierTools:
    """Tests for UUIDs and string hashes."""

    def test_uuids(self, client, seeded_rng):
        result = call_tool(client, "generate_uuid", {"count": 3})
        assert result["count"] == 3
        assert all(UUID_V4.match(u) for u in result["uuids"])
        assert len(set(result["uuids"])) == 3

    def test_uuid_count_capped(self, client, seeded_rng):
        assert call_tool(client, "generate_uuid", {"count": 500})["count"] == 50

    def test_hashes(self, client):
        expected = {
            "simple32": "00017862",
            "djb2": "b885c8b",
            "sdbm": "3025f862",
            "adler32": "24d0127",
        }
        for algorithm, digest in expected.items():
            result = call_tool(client, "hash_generator", {"text": "abc", "algorithm": algorithm})
            assert result["hash"] == digest, algorithm
            assert result["text"] == "abc"

    def test_hash_uses_utf16_code_units(self, client):
        """Characters outside the BMP hash as their surrogate pair."""
        result = call_tool(client, "hash_generator", {"text": "\U0001F600", "algorithm": "simple32"})
        assert result["hash"] == "001b0d63"

    def test_adler32_stays_unsigned(self, client):
        result = call_tool(client, "hash_generator", {"text": "z" * 400, "algorithm": "adler32"})
        assert not result["hash"].startswith("-")

    def test_unknown_algorithm(self, client):
        assert tool_error(client, "hash_generator", {"text": "x", "algorithm": "md5"})["code"] == -32000


class TestMockData:
    """Tests for generate_mock_data."""

    def test_users(self, client, seeded_rng):
        result = call_tool(client, "generate_mock_data", {"type": "users", "count": 3})
        assert result["type"] == "users"
        assert len(result["data"]) == 3
        for user in result["data"]:
            assert set(user) == {"id", "name", "email", "age", "company", "phone"}
            assert 18 <= user["age"] < 65
            assert user["email"].endswith("@email.com")

    def test_orders_dated_in_last_month(self, client, seeded_rng, frozen_now):
        rows = call_tool(client, "generate_mock_data", {"type": "orders", "count": 10})["data"]
        assert all("2023-12-16" <= row["date"] <= "2024-01-15" for row in rows)
        assert all(row["id"].startswith("ORD-") for row in rows)

    def test_row_count_capped(self, client, seeded_rng):
        assert len(call_tool(client, "generate_mock_data", {"type": "addresses", "count": 500})["data"]) == 100

    def test_unknown_type(self, client):
        error = tool_error(client, "generate_mock_data", {"type": "pets"})
        assert error["code"] == -32000
        assert "Unknown data type: pets" in error["message"]


class TestPalettes:
    """Tests for color_palette_generator."""

    def test_monochromatic(self, client):
        result = call_tool(client, "color_palette_generator", {"base_hex": "#3B82F6"})
        assert result["palette_type"] == "monochromatic"
        assert result["palette"] == [
            {"name": "Darkest", "hex": "#12274A"},
            {"name": "Dark", "hex": "#234E94"},
            {"name": "Base", "hex": "#3B82F6"},
            {"name": "Light", "hex": "#89B4FA"},
            {"name": "Lightest", "hex": "#D8E6FD"},
        ]

    def test_complementary(self, client):
        result = call_tool(client, "color_palette_generator", {"base_hex": "#3B82F6", "palette_type": "complementary"})
        assert result["palette"][1] == {"name": "Complement", "hex": "#C47D09"}

    def test_triadic_rotates_channels(self, client):
        result = call_tool(client, "color_palette_generator", {"base_hex": "#3B82F6", "palette_type": "triadic"})
        assert [c["hex"] for c in result["palette"]] == ["#3B82F6", "#82F63B", "#F63B82"]

    def test_short_hex(self, client):
        result = call_tool(client, "color_palette_generator", {"base_hex": "#fff", "palette_type": "complementary"})
        assert result["palette"] == [{"name": "Primary", "hex": "#FFF"}, {"name": "Complement", "hex": "#000000"}]

    def test_invalid_hex(self, client):
        assert tool_error(client, "color_palette_generator", {"base_hex": "blue"})["code"] == -32000

    def test_unknown_palette_type(self, client):
        error = tool_error(client, "color_palette_generator", {"base_hex": "#3B82F6", "palette_type": "neon"})
        assert "Unknown palette type: neon" in error["message"]


class TestScaffolding:
    """Tests for endpoint maps, SQL templates and .env files."""

    def test_api_endpoints(self, client):
        result = call_tool(client, "api_endpoint_generator", {"resource": "users", "include_auth": False})
        endpoints = result["endpoints"]
        assert [e["method"] for e in endpoints] == ["GET", "POST", "GET", "PUT", "PATCH", "DELETE"]
        assert endpoints[0]["url"] == "https://api.example.com/v1/users"
        assert endpoints[2]["url"] == "https://api.example.com/v1/users/{id}"
        assert endpoints[1]["description"] == "Create a new user"
        assert all("headers" not in e for e in endpoints)
        assert result["openapi_tag"] == "Users"

    def test_api_endpoints_with_auth(self, client):
        endpoints = call_tool(client, "api_endpoint_generator", {"resource": "orders"})["endpoints"]
        assert all(e["headers"] == {"Authorization": "Bearer {token}"} for e in endpoints)

    def test_select(self, client):
        args = {"query_type": "select", "table": "users", "columns": ["id", "name"], "conditions": "age > 18"}
        result = call_tool(client, "sql_query_builder", args)
        assert result == {
            "query": "SELECT id, name\nFROM users\nWHERE age > 18;",
            "query_type": "select",
            "table": "users",
            "warning": None,
        }

    def test_insert_literals(self, client):
        args = {"query_type": "insert", "table": "users", "values": {"name": "Ada", "age": 36, "nick": None}}
        result = call_tool(client, "sql_query_builder", args)
        assert result["query"] == "INSERT INTO users (name, age, nick)\nVALUES ('Ada', 36, NULL);"

    def test_delete_without_where_warns(self, client):
        result = call_tool(client, "sql_query_builder", {"query_type": "delete", "table": "users"})
        assert result["query"] == "DELETE FROM users;"
        assert result["warning"] == "⚠️ No WHERE clause - this will delete ALL rows!"

    def test_create_table(self, client):
        args = {"query_type": "create_table", "table": "users", "columns": ["name", "email"]}
        assert call_tool(client, "sql_query_builder", args)["query"] == (
            "CREATE TABLE IF NOT EXISTS users (\n"
            "  id SERIAL PRIMARY KEY,\n"
            "  name VARCHAR(255),\n"
            "  email VARCHAR(255),\n"
            "  created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP\n"
            ");"
        )

    def test_unknown_query_type(self, client):
        assert tool_error(client, "sql_query_builder", {"query_type": "merge", "table": "t"})["code"] == -32000

    def test_env_file(self, client, frozen_now):
        args = {
            "app_name": "MyApp",
            "variables": [
                {"name": "API_KEY", "description": "API key", "required": True},
                {"name": "PORT", "default_value": "3000"},
            ],
        }
        result = call_tool(client, "environment_variable_generator", args)
        assert result["env_file"] == (
            "# MyApp Environment Variables\n"
            "# Generated: 2024-01-15T12:00:00.000Z\n\n"
            "# API key (REQUIRED)\nAPI_KEY=\n\n"
            "# PORT\nPORT=3000"
        )
        assert result["variable_count"] == 2
        assert result["environments"] == ["development", "production"]
