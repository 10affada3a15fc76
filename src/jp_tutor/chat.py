"""Vocabulary chatbot backed by a Gemini model."""
import logging

from google import genai

from jp_tutor.errors import ChatServiceFailure
from jp_tutor.settings import Settings, get_settings

logger = logging.getLogger(__name__)

APOLOGY = "Sorry, the AI assistant is unavailable right now. Please try again."

PROMPT_TEMPLATE = """Answer in {language} only. You are a Japanese vocabulary tutor. \
Keep answers short and to the point, give the key content without elaborating.
Question: {message}
Answer:"""


class ChatService:
    """Forwards one message to the model and relays the generated text."""

    def __init__(self, settings: Settings | None = None, client=None):
        if settings is None:
            settings = get_settings()
        self.settings = settings
        self.model_id = settings.gemini_model
        self.language = settings.chat_language
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if not self.settings.gemini_api_key:
                raise ChatServiceFailure("GEMINI_API_KEY is required")
            self._client = genai.Client(api_key=self.settings.gemini_api_key)
            logger.info("Initialized Gemini client with model: %s", self.model_id)
        return self._client

    def build_prompt(self, message: str) -> str:
        return PROMPT_TEMPLATE.format(language=self.language, message=message.strip())

    def ask(self, message: str) -> str:
        if not message or not message.strip():
            raise ValueError("Message is required")
        client = self.client
        try:
            response = client.models.generate_content(model=self.model_id, contents=self.build_prompt(message))
            text = (response.text or "").strip()
        except Exception as e:
            logger.error("Error calling Gemini API: %s", e)
            raise ChatServiceFailure("Failed to get response from AI") from e
        if not text:
            raise ChatServiceFailure("Empty response from AI")
        return text

    def reply(self, message: str) -> str:
        """Model reply, or the apology message when the model is unavailable."""
        try:
            return self.ask(message)
        except ChatServiceFailure as e:
            logger.warning("Chat failed: %s", e)
            return APOLOGY
