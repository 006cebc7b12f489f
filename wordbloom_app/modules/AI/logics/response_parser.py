"""
Response Parser - Pure functions to clean and parse AI outputs.
"""
import re
import json
from typing import Dict, Any, Optional

# Model JSON keys -> word fields
WORD_DETAIL_KEYS = {
    'term': 'term',
    'pronunciation': 'pronunciation',
    'partOfSpeech': 'part_of_speech',
    'meaning': 'meaning',
    'exampleSentence': 'example_sentence',
    'exampleSentenceMeaning': 'example_sentence_meaning',
}

# Without these a looked-up word cannot be saved
REQUIRED_DETAIL_FIELDS = ('part_of_speech', 'meaning', 'example_sentence')


def _text(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class ResponseParser:
    """Utility to clean and structure AI responses."""

    @staticmethod
    def clean_markdown(text: str) -> str:
        """
        Remove a markdown code fence around the text.

        >>> ResponseParser.clean_markdown('```json\\n{"a": 1}\\n```')
        '{"a": 1}'
        """
        if not text:
            return ""

        # ``` plus an optional language tag at the start, ``` at the end
        cleaned = re.sub(r'^```\w*\s*', '', text.strip())
        cleaned = re.sub(r'\s*```$', '', cleaned)
        return cleaned.strip()

    @staticmethod
    def extract_json(text: str) -> Optional[Dict[str, Any]]:
        """
        Parse a JSON object from raw, fenced or chatty model output.
        """
        if not text:
            return None

        for candidate in (text, ResponseParser.clean_markdown(text)):
            try:
                data = json.loads(candidate)
            except json.JSONDecodeError:
                continue
            return data if isinstance(data, dict) else None

        # First { to last }
        start = text.find('{')
        end = text.rfind('}')
        if start != -1 and end > start:
            try:
                data = json.loads(text[start:end + 1])
            except json.JSONDecodeError:
                return None
            return data if isinstance(data, dict) else None

        return None

    @staticmethod
    def parse_word_details(text: str) -> Optional[Dict[str, Optional[str]]]:
        """
        Word fields from a word-details response, or None when incomplete.

        >>> ResponseParser.parse_word_details(
        ...     '{"partOfSpeech": "명사", "meaning": "사과", "exampleSentence": "I ate an apple."}'
        ... )['part_of_speech']
        '명사'
        >>> ResponseParser.parse_word_details('{"meaning": null}') is None
        True
        """
        data = ResponseParser.extract_json(text)
        if not data:
            return None
        details = {field: _text(data.get(key)) for key, field in WORD_DETAIL_KEYS.items()}
        if any(not details[f] for f in REQUIRED_DETAIL_FIELDS):
            return None
        return details

    @staticmethod
    def parse_example(text: str) -> Optional[Dict[str, str]]:
        data = ResponseParser.extract_json(text)
        if not data:
            return None
        sentence = _text(data.get('newExampleSentence'))
        meaning = _text(data.get('newExampleSentenceMeaning'))
        if not sentence or not meaning:
            return None
        return {'example_sentence': sentence, 'example_sentence_meaning': meaning}

    @staticmethod
    def parse_summary(text: str) -> Optional[str]:
        data = ResponseParser.extract_json(text)
        if not data:
            return None
        return _text(data.get('summary'))
