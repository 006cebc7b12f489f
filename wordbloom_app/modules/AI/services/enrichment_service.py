"""
Word Enrichment Service
Best-effort AI helpers: word details, alternate examples, illustrations and
text summaries. Every method returns None when nothing usable came back.
"""
from typing import Dict, Optional

from flask import current_app

from wordbloom_app.core.error_handlers import TransientServiceError
from ..logics.prompts import alternate_example_prompt, image_prompt, summary_prompt, word_details_prompt
from ..logics.response_parser import ResponseParser
from .ai_gateway import (
    EXAMPLE_POLICY,
    IMAGE_POLICY,
    SUMMARY_POLICY,
    WORD_DETAILS_POLICY,
    AIGateway,
)


class WordEnrichmentService:

    @staticmethod
    def lookup_word_details(term: str) -> Optional[Dict]:
        """
        Pronunciation, part of speech, meaning and an example for ``term``.

        The model may return a corrected spelling in ``term``. Responses
        missing the meaning, part of speech or example are retried.
        """
        term = (term or '').strip()
        if not term:
            return None
        feature = f"word details '{term}'"

        def call(client):
            details = ResponseParser.parse_word_details(client.generate_json(word_details_prompt(term), temperature=0.5))
            if details is None:
                raise TransientServiceError('Incomplete word details in AI response', feature=feature)
            details['term'] = details['term'] or term
            return details

        return AIGateway.call(feature, call, WORD_DETAILS_POLICY)

    @staticmethod
    def generate_alternate_example(word, grade_level: str) -> Optional[Dict]:
        """A new example sentence and its translation, pitched at ``grade_level``."""
        feature = f"example '{word.term}'"

        def call(client):
            example = ResponseParser.parse_example(
                client.generate_json(alternate_example_prompt(word, grade_level), temperature=0.7)
            )
            if example is None:
                raise TransientServiceError('Incomplete example in AI response', feature=feature)
            return example

        return AIGateway.call(feature, call, EXAMPLE_POLICY)

    @staticmethod
    def generate_image(term: str) -> Optional[str]:
        """Base64 JPEG illustrating ``term``."""
        term = (term or '').strip()
        if not term:
            return None
        feature = f"image '{term}'"

        def call(client):
            image = client.generate_image(image_prompt(term))
            if not image:
                raise TransientServiceError('AI response carried no image data', feature=feature)
            return image

        return AIGateway.call(feature, call, IMAGE_POLICY)

    @staticmethod
    def summarize(text: str) -> Optional[str]:
        if not (text or '').strip():
            current_app.logger.info("[AI] summary: nothing to summarize")
            return None

        def call(client):
            summary = ResponseParser.parse_summary(client.generate_json(summary_prompt(text), temperature=0.6))
            if summary is None:
                raise TransientServiceError('AI response carried no summary', feature='summary')
            return summary

        return AIGateway.call('summary', call, SUMMARY_POLICY)
