"""Tests for the Text & Content tools."""
from __future__ import annotations

import string

from .helpers import call_tool, tool_error


class TestAnalysisTools:
    """Tests for counting, statistics, readability, summaries and diffs."""

    def test_word_count_empty_text(self, client):
        result = call_tool(client, "word_count", {"text": ""})
        assert result["words"] == 0
        assert result["characters"] == 0
        assert result["paragraphs"] == 0
        # Empty text still reads as one token
        assert result["reading_time_minutes"] == 1

    def test_word_count_sentences_and_paragraphs(self, client):
        result = call_tool(client, "word_count", {"text": "One. Two!\n\nThree?"})
        assert result["sentences"] == 3
        assert result["paragraphs"] == 2
        assert result["words"] == 3

    def test_text_statistics(self, client):
        result = call_tool(client, "text_statistics", {"text": "the cat and the hat"})
        assert result["total_words"] == 5
        assert result["unique_words"] == 4
        assert result["avg_word_length"] == 3
        assert result["top_10_words"][0] == {"word": "the", "count": 2}
        assert result["longest_word"] == "the"
        assert result["lexical_diversity"] == 0.8

    def test_text_statistics_without_words(self, client):
        """No words means no diversity ratio rather than a division error."""
        result = call_tool(client, "text_statistics", {"text": "123 !!!"})
        assert result["total_words"] == 0
        assert result["longest_word"] == ""
        assert result["lexical_diversity"] is None

    def test_check_readability(self, client):
        result = call_tool(client, "check_readability", {"text": "The cat sat."})
        assert result == {
            "flesch_kincaid_score": 119,
            "grade_level": -3,
            "readability_level": "Very Easy",
            "avg_words_per_sentence": 3,
            "avg_syllables_per_word": 1,
        }

    def test_summarize_text_picks_richest_sentence(self, client):
        text = "First sentence here. Second one. Third."
        result = call_tool(client, "summarize_text", {"text": text, "max_sentences": 1})
        assert result == {
            "summary": "First sentence here.",
            "original_sentences": 3,
            "summary_sentences": 1,
        }

    def test_text_diff(self, client):
        result = call_tool(client, "text_diff", {"text1": "a\nb", "text2": "a\nc"})
        assert result["are_identical"] is False
        assert result["similarity_percent"] == 100
        assert result["added_lines"] == ["c"]
        assert result["removed_lines"] == ["b"]

    def test_text_diff_two_empty_texts(self, client):
        result = call_tool(client, "text_diff", {"text1": "", "text2": ""})
        assert result["are_identical"] is True
        assert result["similarity_percent"] == 100


class TestTransformTools:
    """Tests for slugs, case conversion, find/replace, truncation and encodings."""

    def test_slug(self, client):
        assert call_tool(client, "text_to_slug", {"text": "Hello World!"}) == {"slug": "hello-world"}

    def test_slug_custom_separator(self, client):
        result = call_tool(client, "text_to_slug", {"text": "Hello World", "separator": "_"})
        assert result["slug"] == "hello_world"

    def test_case_conversions(self, client):
        cases = {
            "camel": "helloWorld",
            "snake": "hello_world",
            "kebab": "hello-world",
            "pascal": "HelloWorld",
            "title": "Hello World",
            "upper": "HELLO WORLD",
        }
        for case_type, expected in cases.items():
            result = call_tool(client, "text_case_converter", {"text": "hello world", "case_type": case_type})
            assert result == {"result": expected, "case_type": case_type}

    def test_sentence_case(self, client):
        result = call_tool(client, "text_case_converter", {"text": "hELLO World", "case_type": "sentence"})
        assert result["result"] == "Hello world"

    def test_unknown_case_type(self, client):
        error = tool_error(client, "text_case_converter", {"text": "x", "case_type": "zigzag"})
        assert error["code"] == -32000
        assert "Unknown case type: zigzag" in error["message"]

    def test_find_replace_literal(self, client):
        result = call_tool(client, "find_replace", {"text": "a.b.c", "find": ".", "replace": "-"})
        assert result == {"result": "a-b-c", "replacements_made": 2}

    def test_find_replace_regex(self, client):
        args = {"text": "a1b22", "find": r"\d+", "replace": "#", "use_regex": True}
        assert call_tool(client, "find_replace", args) == {"result": "a#b#", "replacements_made": 2}

    def test_find_replace_case_insensitive(self, client):
        args = {"text": "Cat cat", "find": "cat", "replace": "dog", "case_sensitive": False}
        assert call_tool(client, "find_replace", args)["result"] == "dog dog"

    def test_find_replace_invalid_regex(self, client):
        error = tool_error(client, "find_replace", {"text": "x", "find": "(", "replace": "", "use_regex": True})
        assert error["code"] == -32000

    def test_truncate_on_word(self, client):
        result = call_tool(client, "truncate_text", {"text": "Hello wonderful world", "max_length": 10})
        assert result == {"result": "Hello...", "truncated": True, "original_length": 21}

    def test_truncate_short_text_untouched(self, client):
        result = call_tool(client, "truncate_text", {"text": "Hi", "max_length": 10})
        assert result == {"result": "Hi", "truncated": False}

    def test_base64(self, client):
        encoded = call_tool(client, "text_encode_decode", {"text": "hello", "operation": "encode_base64"})
        assert encoded["result"] == "aGVsbG8="
        # Missing padding is tolerated
        decoded = call_tool(client, "text_encode_decode", {"text": "aGVsbG8", "operation": "decode_base64"})
        assert decoded["result"] == "hello"

    def test_uri_encoding(self, client):
        result = call_tool(client, "text_encode_decode", {"text": "a b&c", "operation": "encode_uri"})
        assert result["result"] == "a%20b%26c"

    def test_bad_percent_encoding_is_soft_error(self, client):
        result = call_tool(client, "text_encode_decode", {"text": "%FF", "operation": "decode_uri"})
        assert "error" in result
        assert result["operation"] == "decode_uri"

    def test_html_entities(self, client):
        encoded = call_tool(client, "text_encode_decode", {"text": '<a href="x">', "operation": "encode_html"})
        assert encoded["result"] == "&lt;a href=&quot;x&quot;&gt;"
        decoded = call_tool(client, "text_encode_decode", {"text": encoded["result"], "operation": "decode_html"})
        assert decoded["result"] == '<a href="x">'

    def test_unknown_operation(self, client):
        result = call_tool(client, "text_encode_decode", {"text": "x", "operation": "rot13"})
        assert result["error"] == "Unknown operation: rot13"


class TestExtractionTools:
    """Tests for email, URL and phone extraction."""

    def test_extract_emails_deduplicated(self, client):
        result = call_tool(client, "extract_emails", {"text": "a@x.com, b@y.org, a@x.com"})
        assert result == {"emails": ["a@x.com", "b@y.org"], "count": 2}

    def test_extract_urls(self, client):
        result = call_tool(client, "extract_urls", {"text": "see https://a.com/x and http://b.org now"})
        assert result == {"urls": ["https://a.com/x", "http://b.org"], "count": 2}

    def test_extract_phone_numbers(self, client):
        result = call_tool(client, "extract_phone_numbers", {"text": "Call 555-123-4567 now"})
        assert result == {"phones": ["555-123-4567"], "count": 1}


class TestValidationTools:
    """Tests for email/URL validation, palindromes and anagrams."""

    def test_valid_email(self, client):
        result = call_tool(client, "validate_email", {"email": "user@example.com"})
        assert result == {
            "is_valid": True,
            "email": "user@example.com",
            "local_part": "user",
            "domain": "example.com",
            "issues": [],
        }

    def test_invalid_email(self, client):
        result = call_tool(client, "validate_email", {"email": "not-an-email"})
        assert result["is_valid"] is False
        assert result["domain"] == ""
        assert result["issues"] == ["Invalid email format"]

    def test_validate_url(self, client):
        result = call_tool(client, "validate_url", {"url": "https://example.com:8080/path?q=1#top"})
        assert result == {
            "is_valid": True,
            "protocol": "https:",
            "hostname": "example.com",
            "port": "8080",
            "pathname": "/path",
            "search": "?q=1",
            "hash": "#top",
            "params": {"q": "1"},
        }

    def test_validate_url_defaults(self, client):
        result = call_tool(client, "validate_url", {"url": "https://example.com"})
        assert result["port"] == "default"
        assert result["pathname"] == "/"

    def test_invalid_url_is_soft_error(self, client):
        result = call_tool(client, "validate_url", {"url": "not a url"})
        assert result == {"is_valid": False, "url": "not a url", "error": "Invalid URL format"}

    def test_palindrome(self, client):
        result = call_tool(client, "palindrome_check", {"text": "A man, a plan, a canal: Panama"})
        assert result["is_palindrome"] is True
        assert result["cleaned_text"] == "amanaplanacanalpanama"

    def test_anagram(self, client):
        result = call_tool(client, "anagram_checker", {"word1": "listen", "word2": "silent"})
        assert result == {"is_anagram": True, "word1_sorted": "eilnst", "word2_sorted": "eilnst"}


class TestGeneratorTools:
    """Tests for lorem ipsum, password and username generation."""

    def test_lorem_ipsum_paragraphs(self, client, seeded_rng):
        result = call_tool(client, "generate_lorem_ipsum", {"paragraphs": 2, "sentences_per_paragraph": 3})
        paragraphs = result["text"].split("\n\n")
        assert len(paragraphs) == 2
        assert all(p[0].isupper() and p.endswith(".") for p in paragraphs)
        assert result["word_count"] == len(result["text"].replace("\n\n", " ").split(" "))

    def test_lorem_ipsum_capped(self, client, seeded_rng):
        result = call_tool(client, "generate_lorem_ipsum", {"paragraphs": 500, "sentences_per_paragraph": 500})
        paragraphs = result["text"].split("\n\n")
        assert result["paragraphs"] == 20
        assert len(paragraphs) == 20
        assert all(p.count(".") == 20 for p in paragraphs)

    def test_password_length_and_strength(self, client, seeded_rng):
        result = call_tool(client, "generate_password", {"length": 12, "count": 3})
        assert len(result["passwords"]) == 3
        assert all(len(p) == 12 for p in result["passwords"])
        assert result["strength"] == "Medium"

    def test_password_default_is_strong(self, client, seeded_rng):
        result = call_tool(client, "generate_password", {})
        assert result["strength"] == "Strong"
        assert len(result["passwords"][0]) == 16

    def test_password_alphabet_respects_flags(self, client, seeded_rng):
        args = {"length": 40, "include_uppercase": False, "include_numbers": False, "include_symbols": False}
        password = call_tool(client, "generate_password", args)["passwords"][0]
        assert set(password) <= set(string.ascii_lowercase)

    def test_password_count_capped(self, client, seeded_rng):
        assert len(call_tool(client, "generate_password", {"count": 50})["passwords"]) == 20

    def test_password_length_capped(self, client, seeded_rng):
        result = call_tool(client, "generate_password", {"length": 10_000})
        assert result["length"] == 128
        assert len(result["passwords"][0]) == 128

    def test_usernames_contain_base(self, client, seeded_rng):
        suggestions = call_tool(client, "generate_username", {"base_word": "John Doe", "count": 5})["suggestions"]
        assert 1 <= len(suggestions) <= 5
        assert all("johndoe" in s for s in suggestions)
        assert len(suggestions) == len(set(suggestions))
