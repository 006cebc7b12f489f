from typing import Dict, Optional

from .services.ai_gateway import AIGateway
from .services.chat_service import get_chat_registry
from .services.enrichment_service import WordEnrichmentService


def ai_status() -> Dict:
    """Whether AI calls can be made right now."""
    cooldown = AIGateway.cooldown()
    active = cooldown.is_open()
    return {
        'configured': AIGateway.is_configured(),
        'cooldown_active': active,
        'cooldown_remaining_seconds': int(cooldown.remaining().total_seconds()) if active else 0,
    }


def lookup_word_details(term: str) -> Optional[Dict]:
    return WordEnrichmentService.lookup_word_details(term)


def generate_alternate_example(word, grade_level: str) -> Optional[Dict]:
    return WordEnrichmentService.generate_alternate_example(word, grade_level)


def generate_image(term: str) -> Optional[str]:
    return WordEnrichmentService.generate_image(term)


def summarize(text: str) -> Optional[str]:
    return WordEnrichmentService.summarize(text)


def reset_cooldown() -> None:
    """Clear the quota cooldown and drop the tutor chat (used by the full data reset)."""
    AIGateway.cooldown().reset()
    get_chat_registry().reset()
