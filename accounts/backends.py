from django.contrib.auth.backends import ModelBackend
from django.contrib.auth import get_user_model
from django.db.models import Q

User = get_user_model()

class EmailBackend(ModelBackend):
    """
    Authenticate using email.

    Accounts are registered with the email as the username, but older
    accounts may differ, so both fields are matched.
    """
    def authenticate(self, request, username=None, password=None, **kwargs):
        if username is None or password is None:
            return None

        user = User.objects.filter(
            Q(username__iexact=username) | Q(email__iexact=username)
        ).order_by('id').first()

        if user and user.check_password(password) and self.user_can_authenticate(user):
            return user

        return None
