"""Business writing templates - emails, job descriptions and press releases."""
from typing import Any
import re

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .. import _runtime
from .._helpers import num_str
from . import CATEGORY

EMAIL_TYPES = (
    "welcome", "follow_up", "cold_outreach", "apology", "rejection",
    "proposal", "invoice_reminder", "thank_you", "announcement",
)


def _email(kind: str, recipient: str, sender: str, company: str, details: str) -> tuple[str, str]:
    match kind:
        case "welcome":
            return (
                f"Welcome to {company}!",
                f"Hi {recipient},\n\nWelcome to {company}! We're thrilled to have you on board.\n\n"
                f"{details}\n\nIf you have any questions, don't hesitate to reach out.\n\n"
                f"Best regards,\n{sender}",
            )
        case "follow_up":
            return (
                "Following up on our conversation",
                f"Hi {recipient},\n\nI wanted to follow up on our recent conversation. {details}\n\n"
                f"Would you be available for a quick call this week?\n\nBest,\n{sender}",
            )
        case "cold_outreach":
            return (
                f"Quick question about {company}",
                f"Hi {recipient},\n\nI hope this finds you well. I came across your work and was "
                f"impressed by what you're doing.\n\n{details}\n\n"
                f"Would you be open to a brief 15-minute call?\n\nBest regards,\n{sender}",
            )
        case "apology":
            return (
                "Our sincere apologies",
                f"Dear {recipient},\n\nWe sincerely apologize for the inconvenience caused. {details}\n\n"
                "We take full responsibility and are committed to making this right. "
                f"Please let us know how we can help.\n\nSincerely,\n{sender}",
            )
        case "proposal":
            return (
                f"Proposal from {company}",
                f"Dear {recipient},\n\nThank you for the opportunity to present our proposal.\n\n"
                f"{details}\n\nI'd be happy to walk you through the details at your convenience.\n\n"
                f"Best regards,\n{sender}",
            )
        case "invoice_reminder":
            return (
                "Invoice Payment Reminder",
                f"Dear {recipient},\n\nThis is a friendly reminder that your invoice is due.\n\n"
                f"{details}\n\nPlease let us know if you have any questions.\n\nThank you,\n{sender}",
            )
        case "thank_you":
            return (
                f"Thank you, {recipient}!",
                f"Dear {recipient},\n\nThank you so much for your time and support.\n\n"
                f"{details}\n\nIt's a pleasure working with you.\n\nWarm regards,\n{sender}",
            )
        case "rejection":
            return (
                "Regarding your application",
                f"Dear {recipient},\n\nThank you for your interest and the time you invested. {details}\n\n"
                "While we won't be moving forward at this time, we encourage you to apply for "
                f"future opportunities.\n\nBest wishes,\n{sender}",
            )
        case "announcement":
            return (
                f"Exciting News from {company}!",
                f"Dear {recipient},\n\nWe're excited to share some news with you!\n\n{details}\n\n"
                "Stay tuned for more updates. Thank you for your continued support!\n\n"
                f"Best,\n{sender}",
            )
    raise HandlerError(f"Unknown email type: {kind}", hint=f"Use one of: {', '.join(EMAIL_TYPES)}")


@Tool(
    "email_template_generator",
    CATEGORY,
    "Generate professional email templates",
    {
        "type": "object",
        "properties": {
            "type": {"type": "string", "enum": list(EMAIL_TYPES)},
            "recipient_name": {"type": "string"},
            "sender_name": {"type": "string"},
            "company": {"type": "string"},
            "key_details": {"type": "string"},
        },
        "required": ["type", "recipient_name", "sender_name"],
    },
)
def email_template_generator(
    type: str,
    recipient_name: str,
    sender_name: str,
    company: str = "our company",
    key_details: str = "",
) -> dict[str, Any]:
    subject, body = _email(type, recipient_name, sender_name, company, key_details)
    return {"subject": subject, "body": body}


@Tool(
    "job_description_generator",
    CATEGORY,
    "Generate job description template",
    {
        "type": "object",
        "properties": {
            "title": {"type": "string"},
            "company": {"type": "string"},
            "department": {"type": "string"},
            "employment_type": {"type": "string", "enum": ["full-time", "part-time", "contract", "internship"]},
            "experience_years": {"type": "number"},
            "location": {"type": "string"},
            "salary_range": {"type": "string"},
        },
        "required": ["title", "company"],
    },
)
def job_description_generator(
    title: str,
    company: str,
    department: str = "General",
    employment_type: str = "full-time",
    experience_years: float = 3,
    location: str = "Remote",
    salary_range: str = "Competitive",
) -> dict[str, Any]:
    mailbox = re.sub(r"\s", "", company.lower())
    text = f"""# {title}
**Company:** {company}
**Department:** {department}
**Type:** {employment_type}
**Location:** {location}
**Salary:** {salary_range}

## About the Role
We are looking for an experienced {title} to join our {department} team at {company}. You will play a key role in driving our mission forward.

## Requirements
- {num_str(experience_years)}+ years of experience in a related role
- Strong communication and collaboration skills
- Problem-solving mindset
- [Add specific technical skills]
- [Add domain expertise]

## Responsibilities
- Lead key initiatives within the {department} team
- Collaborate cross-functionally to deliver results
- Drive continuous improvement
- Mentor junior team members
- [Add role-specific responsibilities]

## What We Offer
- Competitive salary: {salary_range}
- Health, dental, and vision insurance
- Flexible work arrangements
- Professional development budget
- [Add company perks]

## How to Apply
Send your resume and cover letter to careers@{mailbox}.com"""
    return {"job_description": text, "title": title, "company": company, "employment_type": employment_type}


@Tool(
    "press_release_template",
    CATEGORY,
    "Generate a press release template",
    {
        "type": "object",
        "properties": {
            "company": {"type": "string"},
            "headline": {"type": "string"},
            "subheadline": {"type": "string"},
            "city": {"type": "string"},
            "news_summary": {"type": "string"},
            "quote_person": {"type": "string"},
            "quote_title": {"type": "string"},
        },
        "required": ["company", "headline"],
    },
)
def press_release_template(
    company: str,
    headline: str,
    subheadline: str = "",
    city: str = "San Francisco",
    news_summary: str = "",
    quote_person: str = "CEO",
    quote_title: str = "Chief Executive Officer",
) -> dict[str, Any]:
    """Press release skeleton with a dateline for today (UTC)."""
    today = _runtime.utc_now()
    dateline = f"{city}, {today:%B} {today.day}, {today.year}"
    text = f"""FOR IMMEDIATE RELEASE

{headline.upper()}
{subheadline}

{dateline} - {company} today announced [key announcement here].

{news_summary}

"[Compelling quote about why this matters]," said {quote_person}, {quote_title} of {company}. "[Second sentence expanding on the quote]."

[Additional paragraph with supporting details, data, or context]

About {company}
{company} is [brief 2-3 sentence company description]. For more information, visit [website].

###

Media Contact:
[Name]
[Title]
[Email]
[Phone]"""
    return {"press_release": text, "company": company, "headline": headline}
