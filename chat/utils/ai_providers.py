import logging
import openai
import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

# Set up logger
logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 50


class GatewayError(Exception):
    """The AI gateway refused or failed the request"""

    status_code = 500
    public_message = "AI gateway error"

    def __init__(self, message=None, status_code=None, body=None):
        super().__init__(message or self.public_message)
        if status_code is not None:
            self.status_code = status_code
        self.body = body


class RateLimitError(GatewayError):
    status_code = 429
    public_message = "Rate limits exceeded, please try again later."


class PaymentRequiredError(GatewayError):
    status_code = 402
    public_message = "Payment required, please add funds to your AI gateway workspace."


class AIProvider:
    """Base class for AI providers"""

    @staticmethod
    def get_provider(provider_name=None):
        """Factory method to get the appropriate provider"""
        providers = {
            'gateway': GatewayProvider,
        }
        provider_factory = providers.get(provider_name or 'gateway', GatewayProvider)
        return provider_factory()

    def open_stream(self, messages, tools=None):
        """Start a streaming chat completion and return the raw HTTP response"""
        raise NotImplementedError("Subclasses must implement this method")

    def generate_title(self, user_message, ai_response):
        raise NotImplementedError("Subclasses must implement this method")


class GatewayProvider(AIProvider):
    """OpenAI-compatible chat completions gateway"""

    def __init__(self, url=None, api_key=None, model=None, timeout=None):
        self.url = url or settings.AI_GATEWAY_URL
        self.api_key = api_key if api_key is not None else settings.AI_GATEWAY_API_KEY
        self.model = model or settings.AI_GATEWAY_MODEL
        self.timeout = timeout or settings.AI_GATEWAY_TIMEOUT

        if not self.api_key:
            raise ImproperlyConfigured("AI gateway API key is not configured")

    @property
    def base_url(self):
        """The gateway root, as the openai client expects it"""
        suffix = '/chat/completions'
        return self.url[:-len(suffix)] if self.url.endswith(suffix) else self.url

    def open_stream(self, messages, tools=None):
        body = {
            "model": self.model,
            "messages": messages,
            "stream": True,
        }
        if tools:
            body["tools"] = tools

        logger.debug(f"Making API call with {len(messages)} messages and {len(tools or [])} tools.")

        try:
            response = requests.post(
                self.url,
                json=body,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                stream=True,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"AI gateway unreachable: {e}")
            raise GatewayError(f"AI gateway unreachable: {e}")

        if not response.ok:
            status = response.status_code
            text = response.text
            response.close()
            if status == 429:
                raise RateLimitError(body=text)
            if status == 402:
                raise PaymentRequiredError(body=text)
            logger.error(f"AI gateway error: {status} {text[:500]}")
            raise GatewayError(f"AI gateway returned {status}", body=text)

        return response

    def generate_title(self, user_message, ai_response):
        """
        Generate a conversation title based on the first user message and AI response
        """
        client = openai.OpenAI(api_key=self.api_key, base_url=self.base_url, timeout=self.timeout)

        title_prompt = [
            {
                "role": "system",
                "content": f"Generate a short, concise title (maximum {TITLE_MAX_LENGTH} characters) that summarizes this conversation. The title should capture the main topic or purpose of the discussion. Only respond with the title text, no additional commentary or formatting."
            },
            {
                "role": "user",
                "content": f"User: {user_message[:200]}...\nAI: {ai_response[:200]}..."
            }
        ]

        completion = client.chat.completions.create(model=self.model, messages=title_prompt)
        title = (completion.choices[0].message.content or '').strip().strip('"')
        if len(title) > TITLE_MAX_LENGTH:
            title = title[:TITLE_MAX_LENGTH - 3] + "..."
        return title
