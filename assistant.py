"""Conversational security advice backed by a remote language model."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import requests

from config import Settings, get_settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an AI cybersecurity assistant specializing in phishing detection and online safety. "
    "Your role is to:\n\n"
    "1. Help users understand different types of phishing attacks (email, SMS, social media, websites)\n"
    "2. Provide practical security advice and best practices\n"
    "3. Explain how to identify suspicious content and threats\n"
    "4. Offer step-by-step guidance for staying safe online\n"
    "5. Answer questions about cybersecurity tools and techniques\n\n"
    "Keep responses concise, practical, and focused on actionable security advice. "
    "Use a professional but friendly tone. If asked about topics outside cybersecurity, "
    "politely redirect to security-related topics."
)
PRIMER_REPLY = "I understand. I'm ready to help with cybersecurity and phishing protection questions."

FALLBACK_RESPONSE = (
    "I'm experiencing some technical difficulties right now. However, I can still help you with "
    "basic cybersecurity advice: Always verify sender identities, don't click suspicious links, "
    "use strong unique passwords, enable two-factor authentication, and when in doubt, verify "
    "through official channels. What specific security topic would you like to discuss?"
)

HARM_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)

# (trigger words, any-of second words or None, answer); first match wins
CANNED_ANSWERS = (
    (("phishing", "what is"), None,
     "Phishing is a cybercrime where attackers impersonate legitimate organizations to steal sensitive "
     "information like passwords, credit card numbers, or personal data. They typically use fake emails, "
     "websites, or messages that look authentic to trick victims into revealing their information."),
    (("email",), ("safe", "secure"),
     "To stay safe with emails: 1) Always verify the sender's identity, 2) Don't click suspicious links - "
     "hover to see the real URL, 3) Be wary of urgent requests for personal info, 4) Check for "
     "grammar/spelling errors, 5) Use official websites to log into accounts, not email links."),
    (("sms", "text"), None,
     "SMS phishing (smishing) is common. Red flags include: unexpected texts with links, requests for "
     "personal info, urgent payment demands, or messages from unknown numbers. Never click links in "
     "suspicious texts - verify through official channels instead."),
    (("social media", "facebook", "instagram"), None,
     "Social media scams often involve fake investment opportunities, romance scams, or impersonation. "
     "Always verify profiles, don't share personal info with strangers, be skeptical of get-rich-quick "
     "schemes, and report suspicious accounts."),
    (("password", "secure"), None,
     "Password security tips: Use unique, complex passwords for each account, enable two-factor "
     "authentication, use a password manager, never share passwords, and change them if you suspect a breach."),
    (("help", "how"), None,
     "I can help you with: understanding different types of phishing attacks, email security best "
     "practices, SMS/text message safety, social media security, password protection, and general "
     "cybersecurity advice. What specific topic interests you?"),
    (("thank",), None,
     "You're welcome! Stay vigilant and remember - when in doubt, verify through official channels. "
     "Feel free to ask me anything else about cybersecurity!"),
)
DEFAULT_ANSWER = (
    "That's a great question! I can help you understand phishing attacks, security best practices, and "
    "how to stay safe online. Could you be more specific about what you'd like to know? For example, ask "
    "me about email security, SMS safety, or social media protection."
)


class AssistantError(Exception):
    """Raised internally when the model service cannot produce an answer."""


@dataclass
class AssistantReply:
    response: str
    success: bool
    error: Optional[str] = None


def canned_response(message: str) -> str:
    """Offline keyword-routed answer, used when no model service is configured."""
    lowered = (message or "").lower()
    for triggers, companions, answer in CANNED_ANSWERS:
        if not any(t in lowered for t in triggers):
            continue
        if companions and not any(c in lowered for c in companions):
            continue
        return answer
    return DEFAULT_ANSWER


def build_payload(message: str, history: Optional[List[Dict]], settings: Settings) -> Dict:
    contents = [
        {"role": "user", "parts": [{"text": SYSTEM_PROMPT}]},
        {"role": "model", "parts": [{"text": PRIMER_REPLY}]},
    ]
    for turn in history or []:
        role = "user" if turn.get("role") == "user" else "model"
        contents.append({"role": role, "parts": [{"text": str(turn.get("content", ""))}]})
    contents.append({"role": "user", "parts": [{"text": message}]})

    return {
        "contents": contents,
        "generationConfig": {
            "temperature": 0.7,
            "topK": 40,
            "topP": 0.95,
            "maxOutputTokens": settings.assistant_max_tokens,
        },
        "safetySettings": [
            {"category": category, "threshold": "BLOCK_MEDIUM_AND_ABOVE"} for category in HARM_CATEGORIES
        ],
    }


def _extract_text(data) -> str:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise AssistantError("Invalid response from model service") from None
    if not isinstance(text, str) or not text.strip():
        raise AssistantError("Empty response from model service")
    return text


def _request_answer(message: str, history: Optional[List[Dict]], settings: Settings) -> str:
    if not settings.assistant_api_key:
        raise AssistantError("Model service API key not configured")

    url = f"{settings.assistant_url}/{settings.assistant_model}:generateContent"
    headers = {"Content-Type": "application/json", "User-Agent": settings.user_agent}
    try:
        r = requests.post(
            url,
            params={"key": settings.assistant_api_key},
            json=build_payload(message, history, settings),
            headers=headers,
            timeout=settings.assistant_timeout,
        )
    except requests.RequestException as exc:
        raise AssistantError(f"Model service unreachable: {exc.__class__.__name__}") from exc

    if r.status_code >= 400:
        raise AssistantError(f"Model service error: {r.status_code}")
    try:
        data = r.json()
    except ValueError:
        raise AssistantError("Model service returned malformed JSON") from None
    return _extract_text(data)


def ask_assistant(
    message: str,
    history: Optional[List[Dict]] = None,
    settings: Optional[Settings] = None,
) -> AssistantReply:
    """
    Ask the model service for advice. Never raises: any failure yields the
    fixed fallback text with ``success=False`` and the error message.
    """
    settings = settings or get_settings()
    try:
        answer = _request_answer(message, history, settings)
    except AssistantError as exc:
        logger.warning("assistant fallback: %s", exc)
        return AssistantReply(response=FALLBACK_RESPONSE, success=False, error=str(exc))
    return AssistantReply(response=answer, success=True)
