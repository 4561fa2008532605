import logging
import markdown
from collections import OrderedDict
from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.db.models import Max
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods, require_POST

from PMPanda.utils import load_json_body, form_errors
from documents.models import DocumentTemplate
from .forms import ProjectForm
from .models import Project

logger = logging.getLogger(__name__)


def _form_data(project, data):
    """Merge submitted fields over the project's current values"""
    current = {
        'name': project.name,
        'description': project.description or '',
        'type': project.type,
        'status': project.status,
        'priority': project.priority,
        'quarter': project.quarter,
    }
    current.update({key: value for key, value in data.items() if key in current})
    return current


@login_required
@require_http_methods(["GET", "POST"])
def project_list(request):
    """List the user's projects, or create a new one on POST"""
    if request.method == 'GET':
        projects = Project.objects.filter(owner=request.user)
        return JsonResponse({'projects': [p.to_dict() for p in projects]})

    return create_project(request)


def create_project(request):
    try:
        data = load_json_body(request)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)

    form = ProjectForm(_form_data(Project(), data))
    if not form.is_valid():
        return JsonResponse({'error': 'Invalid project', 'errors': form_errors(form)}, status=400)

    project = form.save(commit=False)
    project.owner = request.user

    # New documents start from the user's templates unless content was supplied
    project.prd_content = data.get('prd', DocumentTemplate.get_content(request.user, 'prd'))
    project.spec_content = data.get('spec', DocumentTemplate.get_content(request.user, 'spec'))

    last_order = Project.objects.filter(owner=request.user).aggregate(Max('display_order'))['display_order__max']
    project.display_order = 0 if last_order is None else last_order + 1
    project.save()

    logger.info(f"Project '{project.name}' ({project.id}) created by user {request.user.id}")
    return JsonResponse({'project': project.to_dict(include_documents=True)}, status=201)


@login_required
@require_http_methods(["GET", "POST", "DELETE"])
def project_detail(request, project_id):
    """Read, update or delete a single project"""
    project = get_object_or_404(Project, id=project_id, owner=request.user)

    if request.method == 'DELETE':
        return delete_project(request, project)

    if request.method == 'POST':
        try:
            data = load_json_body(request)
        except ValueError as e:
            return JsonResponse({'error': str(e)}, status=400)

        form = ProjectForm(_form_data(project, data), instance=project)
        if not form.is_valid():
            return JsonResponse({'error': 'Invalid project', 'errors': form_errors(form)}, status=400)
        project = form.save()
        logger.info(f"Project {project.id} updated")

    return JsonResponse({'project': project.to_dict(include_documents=True)})


def delete_project(request, project):
    project_name = project.name
    project.delete()
    logger.info(f"Project '{project_name}' deleted by user {request.user.id}")
    return JsonResponse({'success': True, 'message': f"Project '{project_name}' deleted successfully"})


@login_required
@require_POST
def reorder_projects(request):
    """Move the project at from_index to to_index and renumber display_order"""
    try:
        data = load_json_body(request)
        from_index = int(data['from_index'])
        to_index = int(data['to_index'])
    except (ValueError, KeyError, TypeError) as e:
        return JsonResponse({'error': f"from_index and to_index are required integers: {e}"}, status=400)

    with transaction.atomic():
        projects = list(Project.objects.select_for_update().filter(owner=request.user))
        if not (0 <= from_index < len(projects)) or not (0 <= to_index < len(projects)):
            return JsonResponse({'error': 'Index out of range'}, status=400)

        moved = projects.pop(from_index)
        projects.insert(to_index, moved)
        for order, project in enumerate(projects):
            if project.display_order != order:
                project.display_order = order
                project.save(update_fields=['display_order'])

    return JsonResponse({'projects': [p.to_dict() for p in projects]})


@login_required
@require_http_methods(["GET", "POST"])
def project_document_api(request, project_id, kind):
    """API view to read or replace the PRD or Spec of a project"""
    if kind not in Project.DOCUMENT_FIELDS:
        return JsonResponse({'error': f"Unknown document '{kind}'"}, status=404)

    project = get_object_or_404(Project, id=project_id, owner=request.user)

    if request.method == 'POST':
        try:
            data = load_json_body(request)
        except ValueError as e:
            return JsonResponse({'error': str(e)}, status=400)

        content = data.get('content')
        if not isinstance(content, str):
            return JsonResponse({'error': 'content must be a string'}, status=400)

        Project.write_document(project.id, kind, content)
        project.refresh_from_db()
        logger.info(f"{kind.upper()} of project {project.id} saved from editor")

    return JsonResponse({
        'id': project.id,
        'kind': kind,
        'title': Project.DOCUMENT_TITLES[kind],
        'content': project.get_document(kind),
        'updated_at': project.updated_at.strftime('%Y-%m-%d %H:%M') if project.updated_at else None
    })


@login_required
def project_document_preview(request, project_id, kind):
    """Render a project document from markdown to HTML"""
    if kind not in Project.DOCUMENT_FIELDS:
        return JsonResponse({'error': f"Unknown document '{kind}'"}, status=404)

    project = get_object_or_404(Project, id=project_id, owner=request.user)
    html = markdown.markdown(project.get_document(kind), extensions=['fenced_code', 'tables'])
    return JsonResponse({'id': project.id, 'kind': kind, 'html': html})


@login_required
def roadmap(request):
    """Projects grouped by quarter, quarters sorted chronologically"""
    projects = Project.objects.filter(owner=request.user)

    quarters = OrderedDict()
    for project in sorted(projects, key=lambda p: (_quarter_key(p.quarter), p.display_order)):
        unscheduled, year, q = _quarter_key(project.quarter)
        label = 'Unscheduled' if unscheduled else f"Q{q} {year}"
        quarters.setdefault(label, []).append(project.to_dict())

    return JsonResponse({
        'quarters': [{'quarter': quarter, 'projects': items} for quarter, items in quarters.items()]
    })


def _quarter_key(quarter):
    """Sort key for labels like 'Q3 2024'; anything else sorts last"""
    try:
        q, year = quarter.split()
        return (0, int(year), int(q.lstrip('Qq')))
    except (ValueError, AttributeError):
        return (1, 0, 0)
