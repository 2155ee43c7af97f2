"""Prompt templates for the two completion calls"""

INTENT_SYSTEM_PROMPT = "You are a Tamil-to-English translator and intent detector."

INTENT_USER_TEMPLATE = "Translate this to English and detect the intent: {text}"

CODEGEN_SYSTEM_PROMPT = "You generate full HTML websites based on a request."

CODEGEN_USER_TEMPLATE = "Generate a simple HTML site for: {intent}"


def build_intent_prompt(text: str) -> str:
    return INTENT_USER_TEMPLATE.format(text=text)


def build_codegen_prompt(intent: str) -> str:
    return CODEGEN_USER_TEMPLATE.format(intent=intent)
