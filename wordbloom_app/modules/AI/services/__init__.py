from .ai_gateway import AIGateway
from .chat_service import ChatTutorService, ChatTutorRegistry
from .enrichment_service import WordEnrichmentService

__all__ = ['AIGateway', 'ChatTutorRegistry', 'ChatTutorService', 'WordEnrichmentService']
