"""
Source attribution prompt templates.

Defines the fixed system prompt and the per-call user prompt that pairs a
care plan segment with the patient record.

Dependencies: langchain_core.prompts, langchain_core.messages
System role: Prompt construction for the attribution LLM calls
"""

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.prompts import PromptTemplate

ATTRIBUTION_PROMPT_NAME = "care-plan-source-attribution"
ATTRIBUTION_PROMPT_VERSION = 2

ATTRIBUTION_SYSTEM_PROMPT = """Analyze the care plan and map each statement to its supporting evidence. Return ONLY valid JSON:

{
  "sections": [
    {
      "section": "Section Name",
      "statements": [
        {
          "statement": "Exact text",
          "sources": ["Patient Record: [data]", "Clinical Reasoning: [explanation]", "Standard Practice: [guideline]"],
          "attribution_type": "patient_data|clinical_reasoning|standard_practice|mixed"
        }
      ]
    }
  ]
}

Map ALL statements. Categorize support type. Be concise."""

ATTRIBUTION_USER_PROMPT = PromptTemplate.from_template(
    """CARE PLAN:
{care_plan}

PATIENT DATA:
{patient_data}

Analyze each statement. Map to patient data, clinical reasoning, or standard practice. Return JSON only."""
)

_ROLE_BY_MESSAGE_TYPE = {"system": "system", "human": "user", "ai": "assistant"}


def build_attribution_prompt(care_plan_text: str, patient_record_text: str) -> str:
    """
    Build the user-turn prompt for one attribution call.

    Args:
        care_plan_text: Care plan text or chunk, embedded verbatim
        patient_record_text: Full patient record text, embedded verbatim

    Returns:
        str: Rendered user prompt
    """
    return ATTRIBUTION_USER_PROMPT.format(
        care_plan=care_plan_text,
        patient_data=patient_record_text,
    )


def build_attribution_messages(
    care_plan_text: str,
    patient_record_text: str,
) -> list[dict[str, str]]:
    """
    Build chat-completions messages for one attribution call.

    Args:
        care_plan_text: Care plan text or chunk
        patient_record_text: Full patient record text

    Returns:
        list[dict[str, str]]: System and user messages in OpenAI format
    """
    messages = [
        SystemMessage(content=ATTRIBUTION_SYSTEM_PROMPT),
        HumanMessage(content=build_attribution_prompt(care_plan_text, patient_record_text)),
    ]
    return [
        {"role": _ROLE_BY_MESSAGE_TYPE[message.type], "content": message.content}
        for message in messages
    ]
