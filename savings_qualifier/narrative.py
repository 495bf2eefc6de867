# =========================
# Optional LLM talking points
# =========================
import json
import logging
from typing import Callable, Optional

import anthropic
from anthropic import Anthropic

from . import config
from .calculator import money
from .models import SavingsResult, SessionInput

logger = logging.getLogger(__name__)

_client: Optional[Anthropic] = None


def get_client() -> Optional[Anthropic]:
    """Shared client, or None when no ANTHROPIC_API_KEY is configured."""
    global _client
    if _client is None and config.ANTHROPIC_API_KEY:
        _client = Anthropic(api_key=config.ANTHROPIC_API_KEY)
    return _client


def fallback_pitch(session: SessionInput, result: SavingsResult) -> str:
    plan = result.recommended_plan
    bits = [f"GFiber {plan.display_name} runs {money(plan.monthly_cost)}/month"]
    if plan.download_speed_mbps:
        bits.append(f"with {plan.download_speed_mbps:,} Mbps up and down, no data caps")
    if result.tv_cost:
        bits.append(f"and YouTube TV adds {money(result.tv_cost)}/month")
    base = " ".join(bits) + "."
    vs = f" compared with {session.provider_name}" if session.provider_name else ""

    if result.monthly_savings > 0:
        return (
            f"{base} That saves the customer about {money(result.monthly_savings)} a month{vs}, "
            f"or {money(result.yearly_savings)} over a year."
        )
    if result.monthly_savings == 0:
        return f"{base} It costs the same as today, with symmetrical fiber speeds on top."
    return (
        f"{base} It is {money(-result.monthly_savings)} a month more{vs}, so lead with "
        "reliability, symmetrical upload and transparent pricing."
    )


def model_pitch(session: SessionInput, result: SavingsResult, client: Anthropic) -> str:
    """Ask Claude for the talking points. Returns "" if no text came back.

    Raises ``anthropic.APIError``; ``pitch`` turns that into the template copy.
    """
    plan = result.recommended_plan
    payload = {
        "current_provider": session.provider_name,
        "current_monthly_cost": str(result.current_monthly_cost),
        "gfiber_plan": {
            "name": plan.display_name,
            "price": str(plan.monthly_cost),
            "symmetrical_mbps": plan.download_speed_mbps,
        },
        "youtube_tv_added": str(result.tv_cost) if result.tv_cost else None,
        "gfiber_total": str(result.gfiber_total),
        "monthly_savings": str(result.monthly_savings),
        "yearly_savings": str(result.yearly_savings),
    }
    system_msg = (
        "You write short talking points for a fiber internet sales rep. "
        "Tone: friendly, factual, 2–3 sentences, no markdown. "
        "Keep every dollar amount exactly as given. No speed guarantees or legal terms. "
        "If savings are negative, do not hide it; lead with non-price benefits instead."
    )

    resp = client.messages.create(
        model=config.ANTHROPIC_MODEL,
        max_tokens=200,
        temperature=0.4,
        system=system_msg,
        messages=[{"role": "user", "content": "Write the talking points for:\n" + json.dumps(payload)}],
    )
    for block in getattr(resp, "content", None) or []:
        if getattr(block, "type", "") == "text":
            txt = getattr(block, "text", "").strip()
            if txt:
                return txt
    return ""


Writer = Callable[[SessionInput, SavingsResult, Anthropic], str]


def pitch(
    session: SessionInput,
    result: SavingsResult,
    client: Optional[Anthropic] = None,
    writer: Optional[Writer] = None,
) -> str:
    """
    2–3 sentences the rep can read to the customer.
    Uses Claude when a key is set; deterministic copy otherwise or if the API call fails.
    ``writer`` replaces ``model_pitch``, e.g. with a cached wrapper.
    """
    client = client or get_client()
    if client is None:
        return fallback_pitch(session, result)

    writer = writer or model_pitch
    try:
        txt = writer(session, result, client)
    except anthropic.APIError as e:
        logger.warning("Talking points fell back to template", extra={"error": type(e).__name__})
        return fallback_pitch(session, result)
    return txt or fallback_pitch(session, result)
