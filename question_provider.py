# question_provider.py

import json

import google.generativeai as genai
import requests

from quiz_state import ANSWER_COUNT, MalformedQuestionError, Question

GENERATION_PROMPT = """Generate {count} multiple-choice questions suitable for a Thai 4th-grade student about the "Sufficiency Economy Philosophy".
Focus on concepts like moderation, reasonableness, self-immunity, and new theory agriculture.
Write the questions and answers in English.
Ensure the answers are short (1-3 words) so they fit in falling game objects.
Return a JSON array. Each item must be an object with:
  "question": the question text,
  "answers": an array of exactly {answers} short answer options,
  "correctAnswerIndex": the index (0-{last}) of the correct answer."""

# ---------------------------------------------------------------------
# FALLBACK CONTENT (Sufficiency Economy, grade 4)
# ---------------------------------------------------------------------
FALLBACK_QUESTIONS = [
    {
        "question": "How many rings make up the Sufficiency Economy philosophy?",
        "answers": ["2 rings", "3 rings", "4 rings"],
        "correctAnswerIndex": 1,
    },
    {
        "question": "Growing many kinds of crops on the same land is called?",
        "answers": ["Mixed farming", "Monoculture", "Slash and burn"],
        "correctAnswerIndex": 0,
    },
    {
        "question": "Which one shows moderation?",
        "answers": ["Overspending", "Not being greedy", "Borrowing for trips"],
        "correctAnswerIndex": 1,
    },
]


def fallback_questions():
    return [Question.from_dict(q) for q in FALLBACK_QUESTIONS]


def validate_questions(raw_questions):
    """Keeps the well-formed entries of a provider payload, dropping the rest."""
    if not isinstance(raw_questions, list):
        print(f"[WARN] Question payload is not a list: {type(raw_questions).__name__}")
        return []
    valid = []
    for i, entry in enumerate(raw_questions):
        try:
            valid.append(Question.from_dict(entry))
        except MalformedQuestionError as e:
            print(f"[WARN] Discarding question {i}: {e}")
    return valid


def usable_or_fallback(payload):
    questions = validate_questions(payload)
    if not questions:
        print("[WARN] No usable questions from provider. Using built-in questions.")
        return fallback_questions()
    return questions


def generate_questions(api_key, model_name='gemini-2.5-flash', count=5):
    """Asks Gemini for a fresh question set; falls back to the built-in list on any failure."""
    prompt = GENERATION_PROMPT.format(count=count, answers=ANSWER_COUNT, last=ANSWER_COUNT - 1)
    try:
        genai.configure(api_key=api_key)
        model = genai.GenerativeModel(model_name)
        response = model.generate_content(
            prompt,
            generation_config={"response_mime_type": "application/json"},
        )
        payload = json.loads(response.text or "[]")
    except Exception as e:
        print(f"[WARN] Failed to generate questions: {e}. Using built-in questions.")
        return fallback_questions()
    return usable_or_fallback(payload)


def fetch_questions(url, timeout=5, session=None):
    """
    Loads the question list from a JSON content service.

    Any failure (network error, bad JSON, nothing valid in the payload)
    falls back to the built-in questions, so the result always has at least
    one question.
    """
    http = session or requests
    try:
        r = http.get(url, timeout=timeout)
        r.raise_for_status()
        payload = r.json()
    except (requests.RequestException, ValueError) as e:
        print(f"[WARN] Failed to fetch questions: {e}. Using built-in questions.")
        return fallback_questions()
    return usable_or_fallback(payload)


def load_questions(config):
    """Picks the configured provider: Gemini, then the JSON service, then the built-in list."""
    if config.gemini_api_key:
        return generate_questions(config.gemini_api_key, config.gemini_model, config.question_count)
    if config.question_api_url:
        return fetch_questions(config.question_api_url, config.question_timeout)
    return fallback_questions()
