"""
Chat Tutor Service
A conversation with the AI tutor, tied to the learner's grade and name.
"""
from typing import Dict, List, Optional, Tuple

from flask import current_app

from wordbloom_app.core.error_handlers import ValidationError
from wordbloom_app.utils.time_utils import utcnow
from ..logics.prompts import CHAT_FALLBACK_GREETING, CHAT_OPENING_MESSAGE, chat_system_instruction
from .ai_gateway import CHAT_POLICY, AIGateway

CONNECTION_ERROR_REPLY = 'AI 튜터와 연결 중 문제가 발생했어요. 잠시 후 다시 시도해주세요.'


class ChatTutorService:
    """One chat session; the SDK chat keeps the conversation context."""

    def __init__(self, grade: str, username: str):
        self.grade = grade
        self.username = username
        self.messages: List[Dict] = []
        self._chat = None

    @property
    def key(self) -> Tuple[str, str]:
        return self.grade, self.username

    def _record(self, sender: str, text: str) -> Dict:
        message = {'sender': sender, 'text': text, 'timestamp': utcnow().isoformat()}
        self.messages.append(message)
        return message

    def _send(self, text: str) -> Optional[str]:
        def call(client):
            if self._chat is None:
                self._chat = client.create_chat(chat_system_instruction(self.grade, self.username))
            response = self._chat.send_message(text)
            return (response.text or '').strip()

        return AIGateway.call('chat', call, CHAT_POLICY)

    def open(self) -> Dict:
        """Greet the learner. Falls back to a fixed greeting when the model says nothing."""
        if self.messages:
            return self.messages[0]
        reply = self._send(CHAT_OPENING_MESSAGE)
        if reply is None:
            return {'sender': 'ai', 'text': CONNECTION_ERROR_REPLY, 'timestamp': utcnow().isoformat()}
        return self._record('ai', reply or CHAT_FALLBACK_GREETING.format(username=self.username))

    def send(self, message: str) -> Optional[Dict]:
        """The tutor's reply to ``message``; None when the call failed."""
        message = (message or '').strip()
        if not message:
            raise ValidationError('A message is required.', errors={'message': 'required'})
        self._record('user', message)
        reply = self._send(message)
        if reply is None:
            return None
        return self._record('ai', reply)


class ChatTutorRegistry:
    """Holds the live tutor session, re-created when grade or username change."""

    def __init__(self):
        self._session: Optional[ChatTutorService] = None

    def get(self, grade: str, username: str) -> ChatTutorService:
        if self._session is None or self._session.key != (grade, username):
            if self._session is not None:
                current_app.logger.info("[AI] Learner changed, starting a new tutor chat")
            self._session = ChatTutorService(grade, username)
        return self._session

    def reset(self) -> None:
        self._session = None


def get_chat_registry() -> ChatTutorRegistry:
    registry = current_app.extensions.get('chat_tutor')
    if registry is None:
        registry = current_app.extensions['chat_tutor'] = ChatTutorRegistry()
    return registry


def current_chat() -> ChatTutorService:
    """Chat for the learner in the stored settings."""
    from wordbloom_app.modules.user_profile.interface import get_settings

    settings = get_settings()
    return get_chat_registry().get(settings['grade'], settings['username'])
