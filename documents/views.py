import logging
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods, require_POST

from PMPanda.utils import load_json_body
from .models import DocumentTemplate

logger = logging.getLogger(__name__)

TEMPLATE_TYPES = dict(DocumentTemplate.TYPE_CHOICES)


def _template_data(user, template_type):
    template = DocumentTemplate.objects.filter(user=user, type=template_type).first()
    return {
        'type': template_type,
        'title': TEMPLATE_TYPES[template_type],
        'content': template.content if template else DocumentTemplate.DEFAULTS[template_type],
        'is_custom': template is not None,
        'updated_at': template.updated_at.isoformat() if template else None,
    }


@login_required
def template_list(request):
    """API view returning the effective PRD and Spec templates"""
    return JsonResponse({
        'templates': [_template_data(request.user, t) for t in TEMPLATE_TYPES]
    })


@login_required
@require_http_methods(["GET", "POST"])
def template_detail(request, template_type):
    if template_type not in TEMPLATE_TYPES:
        return JsonResponse({'error': f"Unknown template type '{template_type}'"}, status=404)

    if request.method == 'POST':
        try:
            data = load_json_body(request)
        except ValueError as e:
            return JsonResponse({'error': str(e)}, status=400)

        content = data.get('content')
        if not isinstance(content, str) or not content.strip():
            return JsonResponse({'error': 'Template content is required'}, status=400)

        template, created = DocumentTemplate.objects.update_or_create(
            user=request.user,
            type=template_type,
            defaults={'content': content, 'is_default': False}
        )
        logger.info(f"{template_type.upper()} template {'created' if created else 'updated'} for user {request.user.id}")

    return JsonResponse(_template_data(request.user, template_type))


@login_required
@require_POST
def reset_template(request, template_type):
    """Drop the user's saved template so the built-in default applies again"""
    if template_type not in TEMPLATE_TYPES:
        return JsonResponse({'error': f"Unknown template type '{template_type}'"}, status=404)

    deleted, _ = DocumentTemplate.objects.filter(user=request.user, type=template_type).delete()
    if deleted:
        logger.info(f"{template_type.upper()} template reset to default for user {request.user.id}")
    return JsonResponse(_template_data(request.user, template_type))
