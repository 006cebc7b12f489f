"""
Tests for the AI helpers that need no network: cooldown, error
classification, retry/backoff and response parsing.
"""

from datetime import datetime, timedelta, timezone

import pytest

from wordbloom_app.core.error_handlers import QuotaExhaustedError
from wordbloom_app.modules.AI.logics.cooldown import QuotaCooldown
from wordbloom_app.modules.AI.logics.error_classifier import ErrorKind, classify_error
from wordbloom_app.modules.AI.logics.prompts import SUMMARY_MAX_CHARS, chat_system_instruction, summary_prompt
from wordbloom_app.modules.AI.logics.response_parser import ResponseParser
from wordbloom_app.modules.AI.logics.retry import RetryPolicy, with_retry


class FakeAPIError(Exception):
    """Same attributes as ``google.genai.errors.APIError``."""

    def __init__(self, code=None, status=None, message=''):
        super().__init__(message)
        self.code = code
        self.status = status
        self.message = message


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class TestQuotaCooldown:

    def test_closed_until_tripped(self):
        cooldown = QuotaCooldown(timedelta(minutes=15), clock=FakeClock())
        assert cooldown.is_open() is False
        assert cooldown.remaining() == timedelta(0)

    def test_trip_opens_for_duration(self):
        clock = FakeClock()
        cooldown = QuotaCooldown(timedelta(minutes=15), clock=clock)

        assert cooldown.trip() is True
        clock.advance(minutes=14)
        assert cooldown.is_open() is True
        assert cooldown.remaining() == timedelta(minutes=1)

    def test_expiry_fires_callback_once(self):
        clock = FakeClock()
        expired = []
        cooldown = QuotaCooldown(timedelta(minutes=15), clock=clock, on_expire=lambda: expired.append(True))

        cooldown.trip()
        clock.advance(minutes=15)
        assert cooldown.is_open() is False
        assert cooldown.is_open() is False
        assert expired == [True]

    def test_trip_while_open_does_not_extend(self):
        clock = FakeClock()
        cooldown = QuotaCooldown(timedelta(minutes=15), clock=clock)
        cooldown.trip()
        until = cooldown.cooldown_until

        clock.advance(minutes=5)
        assert cooldown.trip() is False
        assert cooldown.cooldown_until == until

    def test_reset_does_not_fire_callback(self):
        expired = []
        cooldown = QuotaCooldown(timedelta(minutes=15), clock=FakeClock(), on_expire=lambda: expired.append(True))
        cooldown.trip()
        cooldown.reset()
        assert cooldown.is_open() is False
        assert expired == []


class TestClassifyError:

    @pytest.mark.parametrize('error, kind', [
        (FakeAPIError(429, 'RESOURCE_EXHAUSTED', 'Resource has been exhausted'), ErrorKind.QUOTA),
        (FakeAPIError(429, None, 'You exceeded your current quota'), ErrorKind.QUOTA),
        (FakeAPIError(None, None, 'Quota exceeded for this project'), ErrorKind.QUOTA),
        (FakeAPIError(429, None, 'Too many requests'), ErrorKind.RATE_LIMITED),
        (FakeAPIError(500, 'INTERNAL', 'Internal error'), ErrorKind.TRANSIENT),
        (FakeAPIError(503, 'UNAVAILABLE', 'Overloaded'), ErrorKind.TRANSIENT),
        (FakeAPIError(400, 'INVALID_ARGUMENT', 'Bad request'), ErrorKind.TERMINAL),
        (FakeAPIError(403, 'PERMISSION_DENIED', 'API key not valid'), ErrorKind.TERMINAL),
        (ValueError('Expecting value: line 1 column 1'), ErrorKind.TRANSIENT),
    ])
    def test_classification(self, error, kind):
        assert classify_error(error) == kind


class TestWithRetry:

    def _flaky(self, errors, result='ok'):
        calls = []

        def fn():
            calls.append(1)
            if len(calls) <= len(errors):
                raise errors[len(calls) - 1]
            return result

        return fn, calls

    def test_retries_transient_errors_with_backoff(self):
        fn, calls = self._flaky([FakeAPIError(503), FakeAPIError(429, None, 'slow down')])
        sleeps = []

        assert with_retry(fn, RetryPolicy(3, 7.0), classify_error, sleep=sleeps.append) == 'ok'
        assert len(calls) == 3
        assert sleeps == [7.0, 14.0]

    def test_gives_up_after_max_attempts(self):
        fn, calls = self._flaky([FakeAPIError(503)] * 5)

        with pytest.raises(FakeAPIError):
            with_retry(fn, RetryPolicy(2, 8.0), classify_error, sleep=lambda _: None)
        assert len(calls) == 2

    def test_quota_is_never_retried(self):
        fn, calls = self._flaky([FakeAPIError(429, 'RESOURCE_EXHAUSTED', 'quota')])

        with pytest.raises(QuotaExhaustedError):
            with_retry(fn, RetryPolicy(3, 7.0), classify_error, sleep=lambda _: None)
        assert len(calls) == 1

    def test_terminal_error_is_raised_at_once(self):
        fn, calls = self._flaky([FakeAPIError(400, 'INVALID_ARGUMENT', 'bad')])

        with pytest.raises(FakeAPIError):
            with_retry(fn, RetryPolicy(3, 7.0), classify_error, sleep=lambda _: None)
        assert len(calls) == 1

    def test_on_retry_sees_each_failed_attempt(self):
        fn, _ = self._flaky([FakeAPIError(503)])
        seen = []
        with_retry(fn, RetryPolicy(3, 5.0), classify_error, sleep=lambda _: None,
                   on_retry=lambda attempt, error, delay: seen.append((attempt, delay)))
        assert seen == [(1, 5.0)]


class TestResponseParser:

    def test_fenced_json(self):
        assert ResponseParser.extract_json('```json\n{"summary": "요약"}\n```') == {'summary': '요약'}

    def test_json_with_surrounding_text(self):
        assert ResponseParser.extract_json('Here you go: {"a": 1} thanks') == {'a': 1}

    def test_not_json(self):
        assert ResponseParser.extract_json('no json here') is None
        assert ResponseParser.extract_json('[1, 2]') is None

    def test_word_details_mapping(self):
        details = ResponseParser.parse_word_details(
            '{"term": "person", "pronunciation": "/ˈpɜːrsən/", "partOfSpeech": "명사", "meaning": "사람",'
            ' "exampleSentence": "This is a person.", "exampleSentenceMeaning": "이것은 사람입니다."}'
        )
        assert details == {
            'term': 'person',
            'pronunciation': '/ˈpɜːrsən/',
            'part_of_speech': '명사',
            'meaning': '사람',
            'example_sentence': 'This is a person.',
            'example_sentence_meaning': '이것은 사람입니다.',
        }

    def test_word_details_all_null_is_incomplete(self):
        assert ResponseParser.parse_word_details(
            '{"partOfSpeech": null, "meaning": null, "exampleSentence": null}'
        ) is None

    def test_example_requires_both_fields(self):
        assert ResponseParser.parse_example('{"newExampleSentence": "Hi."}') is None
        assert ResponseParser.parse_example(
            '{"newExampleSentence": "Hi.", "newExampleSentenceMeaning": "안녕."}'
        ) == {'example_sentence': 'Hi.', 'example_sentence_meaning': '안녕.'}

    def test_blank_summary(self):
        assert ResponseParser.parse_summary('{"summary": "  "}') is None


class TestPrompts:

    def test_summary_text_is_capped(self):
        prompt = summary_prompt('x' * (SUMMARY_MAX_CHARS + 500))
        assert prompt.count('x') - summary_prompt('').count('x') == SUMMARY_MAX_CHARS

    def test_chat_instruction_names_learner(self):
        instruction = chat_system_instruction('middle2', 'mina')
        assert 'middle2 Korean student named mina' in instruction
        assert 'plain text' in instruction
