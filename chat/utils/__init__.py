from .ai_providers import AIProvider, GatewayError, RateLimitError, PaymentRequiredError
from .ai_prompts import get_system_prompt
from .ai_tools import tools_project
from .sse import ChatStreamReader, iter_assistant_text
from .stream_relay import ChatStreamRelay
