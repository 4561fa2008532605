import logging
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ImproperlyConfigured
from django.db import transaction
from django.http import JsonResponse, StreamingHttpResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods, require_POST

from PMPanda.utils import load_json_body
from projects.models import Project
from .models import Conversation, Message
from .utils import (
    AIProvider, GatewayError, ChatStreamRelay, get_system_prompt, tools_project
)

logger = logging.getLogger(__name__)

CHAT_ROLES = ('user', 'assistant')


def clean_messages(raw_messages):
    """
    Keep only role and content of the chat history sent by the client.

    Raises ValueError for anything that is not a list of chat messages.
    """
    if not isinstance(raw_messages, list) or not raw_messages:
        raise ValueError("messages must be a non-empty list")

    messages = []
    for message in raw_messages:
        if not isinstance(message, dict):
            raise ValueError("each message must be an object")
        role = message.get('role')
        content = message.get('content')
        if role not in CHAT_ROLES:
            raise ValueError(f"unsupported message role: {role!r}")
        if not isinstance(content, str):
            raise ValueError("message content must be a string")
        messages.append({"role": role, "content": content})
    return messages


def optional_id(data, *keys):
    """
    The first id found under one of ``keys``, as an int, or None.

    Raises ValueError when the value is not an integer id.
    """
    value = next((data[key] for key in keys if data.get(key) not in (None, '')), None)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{keys[0]} must be an integer id")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{keys[0]} must be an integer id, got {value!r}")


@csrf_exempt
@login_required
@require_POST
def chat_api(request):
    """
    Stream an AI reply as server-sent events.

    Body: {"messages": [{"role", "content"}], "projectId"?, "conversationId"?}
    With a project, the model may call update_prd / update_spec and the
    reply is stored in a project conversation.
    """
    try:
        data = load_json_body(request)
        messages = clean_messages(data.get('messages'))
        project_id = optional_id(data, 'projectId', 'project_id')
        conversation_id = optional_id(data, 'conversationId', 'conversation_id')
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)

    project = None
    if project_id:
        project = get_object_or_404(Project, id=project_id, owner=request.user)

    conversation = None
    if conversation_id:
        conversation = get_object_or_404(Conversation, id=conversation_id, user=request.user)
        if project is not None and conversation.project_id != project.id:
            return JsonResponse({'error': 'Conversation does not belong to this project'}, status=400)

    logger.info(f"Chat request: project={project.id if project else None} messages={len(messages)}")

    system_message = {"role": "system", "content": get_system_prompt(request.user, project)}
    tools = tools_project if project is not None else None

    try:
        provider = AIProvider.get_provider()
        response = provider.open_stream([system_message, *messages], tools=tools)
    except GatewayError as e:
        if e.status_code in (429, 402):
            logger.warning(f"AI gateway refused chat request: {e.status_code}")
        return JsonResponse({'error': e.public_message}, status=e.status_code)
    except ImproperlyConfigured as e:
        logger.error(f"chat error: {e}")
        return JsonResponse({'error': str(e)}, status=500)

    if project is not None and conversation is None:
        conversation = Conversation.objects.create(user=request.user, project=project)

    user_message = messages[-1]['content'] if messages[-1]['role'] == 'user' else None
    if conversation is not None and user_message is not None:
        save_message(conversation, 'user', user_message)

    def on_complete(content):
        if conversation is None or not content:
            return
        save_message(conversation, 'assistant', content)
        if not conversation.title:
            generate_title(provider, conversation, user_message or '', content)

    relay = ChatStreamRelay(response, project_id=project.id if project else None, on_complete=on_complete)

    streaming_response = StreamingHttpResponse(relay, content_type='text/event-stream')
    streaming_response['Cache-Control'] = 'no-cache'
    streaming_response['X-Accel-Buffering'] = 'no'
    if conversation is not None:
        streaming_response['X-Conversation-Id'] = str(conversation.id)
    return streaming_response


def save_message(conversation, role, content):
    with transaction.atomic():
        message = Message.objects.create(conversation=conversation, role=role, content=content)
        # Bump updated_at so the conversation sorts first
        conversation.save(update_fields=['updated_at'])
    return message


def generate_title(provider, conversation, user_message, ai_response):
    """Title a new conversation, falling back to the start of the user message"""
    try:
        title = provider.generate_title(user_message, ai_response)
    except Exception as e:
        logger.error(f"Error generating title: {str(e)}")
        title = ''

    conversation.title = title or user_message[:50] or f"Conversation {conversation.id}"
    conversation.save(update_fields=['title', 'updated_at'])
    logger.debug(f"Generated title for conversation {conversation.id}: {conversation.title}")


@login_required
@require_http_methods(["GET"])
def conversation_list(request, project_id):
    """Return the user's conversations for a project, most recent first."""
    project = get_object_or_404(Project, id=project_id, owner=request.user)
    conversations = Conversation.objects.filter(user=request.user, project=project).order_by('-updated_at')

    data = []
    for conv in conversations:
        data.append({
            'id': conv.id,
            'title': conv.title or f"Conversation {conv.id}",
            'created_at': conv.created_at.isoformat(),
            'updated_at': conv.updated_at.isoformat(),
            'project': {
                'id': project.id,
                'name': project.name,
            }
        })

    return JsonResponse(data, safe=False)


@login_required
@require_http_methods(["GET", "DELETE"])
def conversation_detail(request, conversation_id):
    """Return a conversation with its messages, or delete it."""
    conversation = get_object_or_404(Conversation, id=conversation_id, user=request.user)

    if request.method == 'DELETE':
        conversation.delete()
        return JsonResponse({'success': True})

    messages = [
        {
            'id': msg.id,
            'role': msg.role,
            'content': msg.content,
            'timestamp': msg.created_at.isoformat()
        }
        for msg in conversation.messages.all()
    ]

    return JsonResponse({
        'id': conversation.id,
        'title': conversation.title or f"Conversation {conversation.id}",
        'project_id': conversation.project_id,
        'created_at': conversation.created_at.isoformat(),
        'updated_at': conversation.updated_at.isoformat(),
        'messages': messages
    })
