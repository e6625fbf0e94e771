"""Tests for the AI Prompts category: prompt engineering, writing and planning templates."""
from __future__ import annotations

from .helpers import call_tool, tool_error


class TestPromptEngineering:
    """Tests for system prompts, chain-of-thought and few-shot templates."""

    def test_system_prompt_defaults(self, client):
        result = call_tool(client, "generate_system_prompt", {"role": "support agent", "company": "Acme", "tone": "friendly"})
        prompt = result["system_prompt"]
        assert prompt.startswith(
            "You are a friendly support agent for Acme.\n\n## Your Capabilities\n"
            "- Answer questions related to your role\n"
        )
        assert "- Always be friendly and respectful" in prompt
        assert "## Restrictions" not in prompt
        assert prompt.endswith("- Ask clarifying questions when needed")
        assert result["character_count"] == len(prompt)
        assert (result["role"], result["company"]) == ("support agent", "Acme")

    def test_system_prompt_with_restrictions(self, client):
        args = {"role": "tutor", "capabilities": ["Explain algebra"], "restrictions": ["No homework answers"]}
        prompt = call_tool(client, "generate_system_prompt", args)["system_prompt"]
        assert "## Your Capabilities\n- Explain algebra\n\n## Guidelines" in prompt
        assert "## Restrictions\n- No homework answers\n\n## Response Format" in prompt

    def test_chain_of_thought(self, client):
        result = call_tool(client, "chain_of_thought_prompt", {"problem": "2 + 2?", "domain": "math"})
        prompt = result["enhanced_prompt"]
        assert prompt.startswith("Let's think through this step by step.\n\nProblem: 2 + 2?\n\n")
        assert "Domain context: math" in prompt
        assert result["domain"] == "math"

    def test_few_shot(self, client):
        args = {"task": "Translate", "examples": [{"input": "cat", "output": "gato"}]}
        result = call_tool(client, "few_shot_template", args)
        assert result["prompt"] == (
            "Task: Translate\n\n"
            "Here are some examples:\n\n"
            "Example 1:\nInput: cat\nOutput: gato\n\n"
            "Now apply the same pattern to:\nInput: [YOUR INPUT HERE]\nOutput:"
        )
        assert result["example_count"] == 1

    def test_few_shot_with_new_input(self, client):
        args = {"task": "Translate", "examples": [], "new_input": "dog"}
        assert "Input: dog\nOutput:" in call_tool(client, "few_shot_template", args)["prompt"]


class TestWritingTemplates:
    """Tests for emails, job descriptions and press releases."""

    def test_welcome_email(self, client):
        args = {"type": "welcome", "recipient_name": "Ada", "sender_name": "Bob", "company": "Acme"}
        result = call_tool(client, "email_template_generator", args)
        assert result["subject"] == "Welcome to Acme!"
        assert result["body"].startswith("Hi Ada,\n\nWelcome to Acme!")
        assert result["body"].endswith("Best regards,\nBob")

    def test_every_email_type(self, client):
        for kind in ("follow_up", "cold_outreach", "apology", "rejection", "proposal",
                     "invoice_reminder", "thank_you", "announcement"):
            args = {"type": kind, "recipient_name": "Ada", "sender_name": "Bob", "key_details": "DETAILS"}
            result = call_tool(client, "email_template_generator", args)
            assert "DETAILS" in result["body"], kind
            assert result["body"].endswith("Bob"), kind

    def test_unknown_email_type(self, client):
        error = tool_error(client, "email_template_generator", {"type": "spam", "recipient_name": "A", "sender_name": "B"})
        assert error["code"] == -32000
        assert "Unknown email type: spam" in error["message"]

    def test_job_description(self, client):
        args = {"title": "Data Engineer", "company": "Big Co", "experience_years": 5}
        result = call_tool(client, "job_description_generator", args)
        text = result["job_description"]
        assert text.startswith("# Data Engineer\n**Company:** Big Co\n")
        assert "- 5+ years of experience in a related role" in text
        assert text.endswith("careers@bigco.com")
        assert result["employment_type"] == "full-time"

    def test_press_release(self, client, frozen_now):
        result = call_tool(client, "press_release_template", {"company": "Acme", "headline": "Big news"})
        text = result["press_release"]
        assert text.startswith("FOR IMMEDIATE RELEASE\n\nBIG NEWS\n")
        assert "San Francisco, January 15, 2024 - Acme today announced" in text
        assert "said CEO, Chief Executive Officer of Acme" in text
        assert result["headline"] == "Big news"


class TestPlanningTemplates:
    """Tests for agendas, user stories, OKRs and content calendars."""

    def test_agenda_from_meeting_type(self, client):
        args = {"meeting_title": "Sprint Retro", "meeting_type": "retrospective"}
        result = call_tool(client, "meeting_agenda_generator", args)
        assert result["estimated_time_per_topic"] == 16
        assert result["topics"] == ["What went well?", "What could be improved?", "Action items for next sprint"]
        assert "1. What went well? *(16 min)*" in result["agenda"]
        assert "**Attendees:** TBD" in result["agenda"]

    def test_agenda_explicit_topics_win(self, client):
        args = {"meeting_title": "Sync", "duration_minutes": 30, "topics": ["A", "B"], "attendees": ["Ada", "Bob"]}
        result = call_tool(client, "meeting_agenda_generator", args)
        assert result["estimated_time_per_topic"] == 10
        assert "**Attendees:** Ada, Bob" in result["agenda"]
        assert "2. B *(10 min)*" in result["agenda"]

    def test_agenda_unknown_type(self, client):
        error = tool_error(client, "meeting_agenda_generator", {"meeting_title": "X", "meeting_type": "party"})
        assert "Unknown meeting type: party" in error["message"]

    def test_user_story(self, client):
        result = call_tool(client, "user_story_generator", {"feature": "Reports", "goal": "export data"})
        assert result["user_story"] == (
            "As a **user**, I want to **export data** so that I can **achieve my objective**."
        )
        assert result["acceptance_criteria"][1] == "When I interact with the Reports feature"

    def test_okr(self, client):
        result = call_tool(client, "okr_generator", {"objective": "Grow revenue", "key_results_count": 2})
        okr = result["okr"]
        assert okr["objective"] == {"statement": "Grow revenue", "owner": "Team", "timeframe": "Q1 2025"}
        assert [kr["id"] for kr in okr["key_results"]] == [1, 2]

    def test_okr_key_results_capped(self, client):
        result = call_tool(client, "okr_generator", {"objective": "Grow", "key_results_count": 1000})
        assert len(result["okr"]["key_results"]) == 10

    def test_content_calendar(self, client):
        args = {"brand": "Acme Pay", "industry": "Fintech", "posts_per_week": 3}
        result = call_tool(client, "content_calendar_generator", args)
        calendar = result["weekly_calendar"]
        assert [c["day"] for c in calendar] == ["Monday", "Tuesday", "Wednesday"]
        assert [c["platform"] for c in calendar] == ["LinkedIn", "Twitter", "Instagram"]
        assert calendar[0]["hashtag_tip"] == "#Fintech #AcmePay #[trending hashtag]"
        assert calendar[0]["post_idea"] == "Educational post about Fintech for Acme Pay"
        assert result["monthly_posts_estimate"] == 12

    def test_content_calendar_caps_at_weekdays(self, client):
        result = call_tool(client, "content_calendar_generator", {"brand": "A", "industry": "B", "posts_per_week": 7})
        assert len(result["weekly_calendar"]) == 5
        assert result["monthly_posts_estimate"] == 28
