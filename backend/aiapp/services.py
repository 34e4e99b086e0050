import json
import logging
import re
from typing import Dict, Any, Optional

from django.conf import settings

from billing.budget import ChatTokenBudget, estimate_tokens, get_chat_budget
from common.ids import nanoid
from .client import get_client
from .prompts import (
    SYSTEM_PROMPT, WORKFLOW_PROMPT, BUDGET_EXHAUSTED_MESSAGE, ERROR_MESSAGE, EMPTY_REPLY_MESSAGE,
    BUDGET_SUGGESTIONS, WORKFLOW_SUGGESTIONS, GENERAL_SUGGESTIONS, ERROR_SUGGESTIONS,
)

logger = logging.getLogger(__name__)

JSON_BLOCK = re.compile(r"\{[\s\S]*\}")


def _suggestions_for(reply: str):
    text = reply.lower()
    if "workflow" in text or "automate" in text:
        return list(WORKFLOW_SUGGESTIONS)
    return list(GENERAL_SUGGESTIONS)


def chat(message: str, context: Optional[str] = None, conversation_id: Optional[str] = None,
         client=None, budget: Optional[ChatTokenBudget] = None) -> Dict[str, Any]:
    """
    One assistant turn. Never raises: budget exhaustion and provider errors
    both come back as a canned reply with follow-up suggestions.
    """
    conversation_id = conversation_id or nanoid()
    budget = budget or get_chat_budget()
    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": message},
    ]

    try:
        estimated = estimate_tokens(" ".join(m["content"] for m in messages))
        if not budget.has_budget(estimated):
            logger.warning("Monthly chat budget exhausted", extra={"conversation_id": conversation_id})
            return {"message": BUDGET_EXHAUSTED_MESSAGE, "conversationId": conversation_id,
                    "suggestions": list(BUDGET_SUGGESTIONS)}

        completion = (client or get_client()).chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=messages,
            max_tokens=500,
            temperature=0.7,
        )

        usage = getattr(completion, "usage", None)
        if usage:
            total = budget.record_usage(usage.total_tokens)
            logger.debug("OpenAI usage", extra={"tokens": usage.total_tokens, "monthly_total": total})

        reply = (completion.choices[0].message.content if completion.choices else None) or EMPTY_REPLY_MESSAGE
        logger.info("Chat completed", extra={
            "conversation_id": conversation_id,
            "tokens": usage.total_tokens if usage else None,
            "context": context,
        })
        return {"message": reply, "conversationId": conversation_id, "suggestions": _suggestions_for(reply)}
    except Exception as exc:
        logger.error("OpenAI chat failed: %s", exc, extra={"conversation_id": conversation_id})
        return {"message": ERROR_MESSAGE, "conversationId": conversation_id, "suggestions": list(ERROR_SUGGESTIONS)}


def generate_workflow(description: str, client=None, budget: Optional[ChatTokenBudget] = None) -> Optional[Dict[str, Any]]:
    """Ask the model for a workflow skeleton. Returns None when nothing usable comes back."""
    budget = budget or get_chat_budget()
    prompt = WORKFLOW_PROMPT.format(description=description)
    try:
        if not budget.has_budget(estimate_tokens(prompt)):
            logger.warning("Monthly chat budget exhausted; skipping workflow generation")
            return None

        completion = (client or get_client()).chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=800,
            temperature=0.5,
        )
        usage = getattr(completion, "usage", None)
        if usage:
            budget.record_usage(usage.total_tokens)

        reply = completion.choices[0].message.content if completion.choices else None
        if not reply:
            return None
        # The model may wrap the JSON in markdown fences
        match = JSON_BLOCK.search(reply)
        if not match:
            return None
        workflow = json.loads(match.group(0))
        if not isinstance(workflow, dict):
            return None
        logger.info("Workflow generated", extra={"description": description})
        return workflow
    except Exception as exc:
        logger.error("Workflow generation failed: %s", exc)
        return None


def get_usage_stats(budget: Optional[ChatTokenBudget] = None) -> Dict[str, Any]:
    snap = (budget or get_chat_budget()).snapshot()
    return {
        "monthlyTokens": snap["used"],
        "monthlyBudget": settings.OPENAI_MONTHLY_BUDGET_USD,
        "monthlyTokenAllowance": snap["allowance"],
        "resetDate": snap["resets_at"],
    }
