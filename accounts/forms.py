from django import forms
from django.contrib.auth.models import User
from django.contrib.auth.forms import UserCreationForm, AuthenticationForm
from django.utils.translation import gettext_lazy as _
from .models import Profile, UserPreferences, CompanyInfo

class EmailAuthenticationForm(AuthenticationForm):
    """
    Custom authentication form that uses email for login
    """
    username = forms.EmailField(label=_("Email"))

    error_messages = {
        "invalid_login": _(
            "Please enter a correct email and password. Note that both fields may be case-sensitive."
        ),
        "inactive": _("This account is inactive."),
    }

class UserRegisterForm(UserCreationForm):
    email = forms.EmailField()

    class Meta:
        model = User
        fields = ['email']

    def clean_email(self):
        email = self.cleaned_data['email'].lower()
        if User.objects.filter(username__iexact=email).exists():
            raise forms.ValidationError(_("An account with this email already exists."))
        return email

    def save(self, commit=True):
        user = super().save(commit=False)
        user.username = self.cleaned_data['email']  # Set username to email
        user.email = self.cleaned_data['email']
        if commit:
            user.save()
        return user

class ProfileUpdateForm(forms.ModelForm):
    class Meta:
        model = Profile
        fields = ['name', 'email', 'role', 'company', 'department', 'bio', 'avatar_url']

class PreferencesUpdateForm(forms.ModelForm):
    class Meta:
        model = UserPreferences
        fields = ['prd_template_style', 'spec_template_style', 'communication_style']

class CompanyInfoForm(forms.ModelForm):
    class Meta:
        model = CompanyInfo
        fields = CompanyInfo.FIELDS
