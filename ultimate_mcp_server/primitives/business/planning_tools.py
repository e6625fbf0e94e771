"""Planning templates - business plan outlines and SWOT grids."""
from typing import Any

from ...tool_decorator import Tool
from . import CATEGORY


@Tool(
    "generate_business_plan_outline",
    CATEGORY,
    "Generate a business plan outline for any industry",
    {
        "type": "object",
        "properties": {
            "business_name": {"type": "string"},
            "industry": {"type": "string"},
            "business_type": {"type": "string", "enum": ["startup", "small_business", "enterprise", "nonprofit"]},
        },
        "required": ["business_name", "industry"],
    },
)
def generate_business_plan_outline(business_name: str, industry: str, business_type: str = "startup") -> dict[str, Any]:
    outline = [
        {"section": "1. Executive Summary", "points": [
            "Business description", "Mission statement", "Products/services overview",
            "Financial highlights", "Funding requirements",
        ]},
        {"section": "2. Company Overview", "points": [
            "Business history", "Legal structure", "Location and facilities", "Team overview",
        ]},
        {"section": "3. Market Analysis", "points": [
            f"{industry} industry overview", "Target market definition", "Market size (TAM/SAM/SOM)",
            "Competitor analysis", "Market trends",
        ]},
        {"section": "4. Products & Services", "points": [
            "Product/service description", "Unique value proposition", "Pricing strategy",
            "Intellectual property",
        ]},
        {"section": "5. Marketing Strategy", "points": [
            "Customer acquisition channels", "Brand positioning", "Digital marketing plan", "Sales strategy",
        ]},
        {"section": "6. Operations Plan", "points": [
            "Day-to-day operations", "Supply chain", "Technology infrastructure", "Key partnerships",
        ]},
        {"section": "7. Financial Projections", "points": [
            "Revenue model", "3-year projections", "Break-even analysis", "Funding needs & use of funds",
        ]},
        {"section": "8. Risk Analysis", "points": [
            "Key risks identified", "Mitigation strategies", "Contingency plans",
        ]},
    ]
    return {
        "business_name": business_name,
        "industry": industry,
        "business_type": business_type,
        "outline": outline,
        "estimated_pages": len(outline) * 2,
    }


@Tool(
    "swot_template",
    CATEGORY,
    "Generate a SWOT analysis template for a business",
    {
        "type": "object",
        "properties": {"business_name": {"type": "string"}, "industry": {"type": "string"}},
        "required": ["business_name"],
    },
)
def swot_template(business_name: str, industry: str = "your industry") -> dict[str, Any]:
    return {
        "business": business_name,
        "swot": {
            "strengths": {
                "label": "Strengths (Internal, Positive)",
                "prompts": [
                    "What does the company do well?", "Unique resources or capabilities?",
                    "Strong brand/reputation?", "Patent or proprietary technology?", "Cost advantages?",
                ],
            },
            "weaknesses": {
                "label": "Weaknesses (Internal, Negative)",
                "prompts": [
                    "What could be improved?", "Limited resources?", "Gaps in expertise?",
                    "Negative brand perception?", "High operational costs?",
                ],
            },
            "opportunities": {
                "label": "Opportunities (External, Positive)",
                "prompts": [
                    f"Emerging trends in {industry}?", "New market segments?", "Technology changes?",
                    "Competitor vulnerabilities?", "Regulatory changes?",
                ],
            },
            "threats": {
                "label": "Threats (External, Negative)",
                "prompts": [
                    "New competitors?", "Changing customer needs?", "Economic downturns?",
                    "Supply chain risks?", "Regulatory challenges?",
                ],
            },
        },
    }
