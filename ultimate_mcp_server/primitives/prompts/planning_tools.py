"""Planning templates - meeting agendas, user stories, OKRs and content calendars."""
from typing import Any
import math
import re

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from . import CATEGORY

MEETING_TOPICS = {
    "team_standup": ["What did you accomplish yesterday?", "What will you work on today?", "Any blockers?"],
    "project_kickoff": [
        "Project overview & goals", "Roles & responsibilities", "Timeline & milestones",
        "Risk identification", "Next steps",
    ],
    "retrospective": ["What went well?", "What could be improved?", "Action items for next sprint"],
    "planning": ["Priority review", "Sprint goal setting", "Task assignment", "Capacity planning"],
    "all_hands": ["Company updates", "Department highlights", "Q&A session", "Upcoming events"],
    "one_on_one": [
        "Check-in & wellbeing", "Progress on goals", "Challenges & support needed", "Feedback exchange",
    ],
    "custom": ["Topic 1", "Topic 2", "Discussion"],
}

MAX_KEY_RESULTS = 10

# Reserved for opening and wrap-up
_AGENDA_BUFFER_MINUTES = 10


@Tool(
    "meeting_agenda_generator",
    CATEGORY,
    "Generate a structured meeting agenda",
    {
        "type": "object",
        "properties": {
            "meeting_title": {"type": "string"},
            "duration_minutes": {"type": "number", "default": 60},
            "attendees": {"type": "array", "items": {"type": "string"}},
            "topics": {"type": "array", "items": {"type": "string"}},
            "meeting_type": {"type": "string", "enum": list(MEETING_TOPICS)},
        },
        "required": ["meeting_title"],
    },
)
def meeting_agenda_generator(
    meeting_title: str,
    duration_minutes: float = 60,
    attendees: list[str] | None = None,
    topics: list[str] | None = None,
    meeting_type: str = "custom",
) -> dict[str, Any]:
    """Markdown agenda. Explicit topics win over the meeting type's defaults."""
    attendees = attendees or []
    agenda_topics = topics or MEETING_TOPICS.get(meeting_type)
    if agenda_topics is None:
        raise HandlerError(
            f"Unknown meeting type: {meeting_type}",
            hint=f"Use one of: {', '.join(MEETING_TOPICS)}, or pass topics",
        )

    per_topic = math.floor((duration_minutes - _AGENDA_BUFFER_MINUTES) / len(agenda_topics))
    items = "\n".join(f"{i}. {topic} *({per_topic} min)*" for i, topic in enumerate(agenda_topics, start=1))
    agenda = (
        f"# {meeting_title}\n"
        f"**Duration:** {duration_minutes} minutes\n"
        f"**Attendees:** {', '.join(attendees) if attendees else 'TBD'}\n\n"
        f"## Agenda\n\n{items}\n\n"
        "## Action Items\n- [ ] \n- [ ] \n\n"
        "## Notes\n\n"
        "## Decisions Made\n"
    )
    return {
        "agenda": agenda,
        "meeting_title": meeting_title,
        "duration_minutes": duration_minutes,
        "topics": agenda_topics,
        "estimated_time_per_topic": per_topic,
    }


@Tool(
    "user_story_generator",
    CATEGORY,
    "Generate Agile user stories with acceptance criteria",
    {
        "type": "object",
        "properties": {
            "feature": {"type": "string"},
            "user_type": {"type": "string", "default": "user"},
            "goal": {"type": "string"},
            "reason": {"type": "string"},
        },
        "required": ["feature", "goal"],
    },
)
def user_story_generator(
    feature: str,
    goal: str,
    user_type: str = "user",
    reason: str = "achieve my objective",
) -> dict[str, Any]:
    return {
        "user_story": f"As a **{user_type}**, I want to **{goal}** so that I can **{reason}**.",
        "feature": feature,
        "acceptance_criteria": [
            f"Given I am a {user_type}",
            f"When I interact with the {feature} feature",
            f"Then I should be able to {goal}",
            "And the system should respond within acceptable time",
            "And I should receive appropriate feedback",
        ],
        "definition_of_done": [
            "Feature implemented and tested",
            "Unit tests written and passing",
            "Code reviewed and approved",
            "Documentation updated",
            "Product owner sign-off",
        ],
        "story_points_estimate": "TBD",
        "priority": "Medium",
    }


@Tool(
    "okr_generator",
    CATEGORY,
    "Generate OKR (Objectives & Key Results) framework",
    {
        "type": "object",
        "properties": {
            "objective": {"type": "string"},
            "team": {"type": "string"},
            "timeframe": {"type": "string", "default": "Q1 2025"},
            "key_results_count": {"type": "number", "default": 3},
        },
        "required": ["objective"],
    },
)
def okr_generator(
    objective: str,
    team: str = "Team",
    timeframe: str = "Q1 2025",
    key_results_count: int = 3,
) -> dict[str, Any]:
    key_results = [
        {
            "id": i,
            "description": f'Key Result {i}: [Specific, measurable outcome related to "{objective}"]',
            "metric": "Define metric (e.g., increase X from Y to Z)",
            "baseline": "Current value",
            "target": "Target value",
            "progress": "0%",
        }
        for i in range(1, max(min(int(key_results_count), MAX_KEY_RESULTS), 0) + 1)
    ]
    return {
        "okr": {
            "objective": {"statement": objective, "owner": team, "timeframe": timeframe},
            "key_results": key_results,
        },
        "tips": [
            "Make key results measurable (numbers, %)",
            "Aim for 70% completion as success (stretch goals)",
            "Review weekly, reassess quarterly",
        ],
    }


_POSTING_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
_POSTING_TIMES = ("9:00 AM", "12:00 PM", "3:00 PM", "5:00 PM", "7:00 PM")
_DEFAULT_PLATFORMS = ["LinkedIn", "Twitter", "Instagram"]
_DEFAULT_PILLARS = ["Educational", "Entertaining", "Promotional", "Inspirational", "Engagement"]


def _hashtag(text: str) -> str:
    return "#" + re.sub(r"\s", "", text)


@Tool(
    "content_calendar_generator",
    CATEGORY,
    "Generate a content calendar for social media",
    {
        "type": "object",
        "properties": {
            "brand": {"type": "string"},
            "industry": {"type": "string"},
            "platforms": {"type": "array", "items": {"type": "string"}},
            "posts_per_week": {"type": "number", "default": 5},
            "content_pillars": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["brand", "industry"],
    },
)
def content_calendar_generator(
    brand: str,
    industry: str,
    platforms: list[str] | None = None,
    posts_per_week: int = 5,
    content_pillars: list[str] | None = None,
) -> dict[str, Any]:
    """One post per weekday, at most five. Platforms and pillars rotate."""
    platforms = platforms or _DEFAULT_PLATFORMS
    content_pillars = content_pillars or _DEFAULT_PILLARS

    calendar = []
    for i, day in enumerate(_POSTING_DAYS[:max(int(posts_per_week), 0)]):
        pillar = content_pillars[i % len(content_pillars)]
        calendar.append({
            "day": day,
            "platform": platforms[i % len(platforms)],
            "content_pillar": pillar,
            "post_idea": f"{pillar} post about {industry} for {brand}",
            "best_time": _POSTING_TIMES[i],
            "hashtag_tip": f"{_hashtag(industry)} {_hashtag(brand)} #[trending hashtag]",
        })
    return {
        "brand": brand,
        "industry": industry,
        "platforms": platforms,
        "weekly_calendar": calendar,
        "content_pillars": content_pillars,
        "monthly_posts_estimate": posts_per_week * 4,
    }
