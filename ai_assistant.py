"""Narrative summary of a spending report with offline fallback."""

from __future__ import annotations

import json
from typing import Any, Tuple

from openai import OpenAI, OpenAIError

from config import DEFAULT_AI_MODEL
from logging_setup import get_logger

logger = get_logger(__name__)


def build_offline_summary(report: dict[str, Any]) -> str:
    """Generate a deterministic summary when the API is unavailable."""
    cur = report["metadata"]["currency"]
    monthly = report["monthly_spending"]
    opportunity = report["opportunity_cost"]
    insights = report["insights"]

    lines = [
        "Offline Spending Summary",
        "",
        f"- Spent over the last 12 months: {cur} {monthly['total_spent']:,.2f}",
        f"- Average per month: {cur} {monthly['average_monthly']:,.2f}",
        f"- Top spending category: {insights['top_spending_category']}",
        f"- Environmental impact: {insights['environmental_impact']}",
        "",
        "Priority actions:",
    ]
    over = [row for row in opportunity["category_analysis"] if not row["is_within_limit"]]
    if over:
        for row in sorted(over, key=lambda item: item["annual_savings"], reverse=True):
            lines.append(
                f"- Bring {row['category']} down to {cur} {row['threshold']:,.0f}/month "
                f"(saves {cur} {row['annual_savings']:,.0f}/year)."
            )
        lines.append(f"- {insights['investment_potential']}.")
    else:
        lines.append("- Spending is within the household thresholds; keep monitoring monthly trends.")

    for tip in report["co2_impact"]["environmental_recommendations"]:
        lines.append(f"- {tip}.")

    if report["metadata"].get("reduced_confidence"):
        lines.append("")
        lines.append("Note: some amounts could not be converted or dated; totals are approximate.")
    return "\n".join(lines)


def build_ai_prompt(report: dict[str, Any]) -> str:
    """Build the summarization prompt for a report."""
    lines = [
        "Give me a short financial human readable summary of this person's customer behaviour",
        "",
        "Here is their financial report data:",
        json.dumps(report, indent=2, ensure_ascii=False),
        "",
        "Please provide a concise, actionable summary focusing on:",
        "1. Spending patterns and habits",
        "2. Areas for improvement",
        "3. Environmental impact insights",
        "4. Investment opportunities",
        "5. Key financial recommendations",
        "",
        "Keep it under 300 words and make it easy to understand.",
    ]
    return "\n".join(lines)


def generate_ai_summary(
    report: dict[str, Any],
    api_key: str = "",
    model: str = DEFAULT_AI_MODEL,
) -> Tuple[str, str]:
    """Return (mode, summary_text). Falls back to the offline summary when needed."""
    offline = build_offline_summary(report)
    if not api_key.strip():
        return "offline", offline

    try:
        client = OpenAI(api_key=api_key.strip())
        response = client.chat.completions.create(
            model=model,
            temperature=0.7,
            max_tokens=500,
            messages=[{"role": "user", "content": build_ai_prompt(report)}],
        )
    except OpenAIError as exc:
        logger.warning("Summary request failed, using offline summary: %s", exc)
        return "offline", offline

    content = response.choices[0].message.content if response.choices else ""
    content = (content or "").strip()
    if not content:
        logger.warning("Summary response was empty, using offline summary")
        return "offline", offline
    return "online", content
