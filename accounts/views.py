import logging
from django.contrib.auth import login, logout
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods, require_POST

from PMPanda.utils import load_json_body, form_errors
from .forms import (
    UserRegisterForm, EmailAuthenticationForm, ProfileUpdateForm,
    PreferencesUpdateForm, CompanyInfoForm
)
from .models import Profile, UserPreferences, CompanyInfo

logger = logging.getLogger(__name__)


def get_or_create_preferences(user):
    """Return the user's preferences, creating them with the defaults on first use"""
    preferences, created = UserPreferences.objects.get_or_create(user=user)
    if created:
        logger.info(f"Created default preferences for user {user.id}")
    return preferences


@require_POST
def register(request):
    try:
        data = load_json_body(request)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)

    form = UserRegisterForm({
        'email': data.get('email', ''),
        'password1': data.get('password', ''),
        'password2': data.get('password_confirm', data.get('password', '')),
    })
    if not form.is_valid():
        return JsonResponse({'error': 'Registration failed', 'errors': form_errors(form)}, status=400)

    user = form.save()
    profile = user.profile
    if data.get('name'):
        profile.name = data['name']
        profile.save()
    logger.info(f"Account created for {user.email}")
    login(request, user, backend='accounts.backends.EmailBackend')
    return JsonResponse({'id': user.id, 'email': user.email}, status=201)


@require_POST
def auth(request):
    """Log in with email and password"""
    try:
        data = load_json_body(request)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)

    form = EmailAuthenticationForm(request, data={
        'username': data.get('email', ''),
        'password': data.get('password', ''),
    })
    if not form.is_valid():
        return JsonResponse({'error': 'Invalid email or password', 'errors': form_errors(form)}, status=400)

    user = form.get_user()
    login(request, user)
    return JsonResponse({'id': user.id, 'email': user.email})


@require_POST
def logout_view(request):
    logout(request)
    return JsonResponse({'success': True})


@login_required
@require_http_methods(["GET", "POST"])
def profile(request):
    profile, _ = Profile.objects.get_or_create(user=request.user)

    if request.method == 'POST':
        try:
            data = load_json_body(request)
        except ValueError as e:
            return JsonResponse({'error': str(e)}, status=400)

        # Missing fields keep their stored value
        form = ProfileUpdateForm({**profile.to_dict(), **data}, instance=profile)
        if not form.is_valid():
            return JsonResponse({'error': 'Error updating profile', 'errors': form_errors(form)}, status=400)
        profile = form.save()

    return JsonResponse({'profile': profile.to_dict()})


@login_required
@require_http_methods(["GET", "POST"])
def preferences(request):
    preferences = get_or_create_preferences(request.user)

    if request.method == 'POST':
        try:
            data = load_json_body(request)
        except ValueError as e:
            return JsonResponse({'error': str(e)}, status=400)

        form = PreferencesUpdateForm({**preferences.to_dict(), **data}, instance=preferences)
        if not form.is_valid():
            return JsonResponse({'error': 'Error updating preferences', 'errors': form_errors(form)}, status=400)
        preferences = form.save()

    return JsonResponse({'preferences': preferences.to_dict()})


@login_required
@require_http_methods(["GET", "POST"])
def company_info(request):
    info = CompanyInfo.objects.filter(user=request.user).first()

    if request.method == 'GET':
        return JsonResponse({'company_info': info.to_dict() if info else None})

    try:
        data = load_json_body(request)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)

    created = info is None
    if created:
        info = CompanyInfo(user=request.user)

    form = CompanyInfoForm({**info.to_dict(), **data}, instance=info)
    if not form.is_valid():
        return JsonResponse({'error': 'Error saving company info', 'errors': form_errors(form)}, status=400)
    info = form.save()

    logger.info(f"Company info {'created' if created else 'updated'} for user {request.user.id}")
    return JsonResponse({'company_info': info.to_dict()}, status=201 if created else 200)
