from django.db import models
from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver


class Profile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE)
    name = models.CharField(max_length=255, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    role = models.CharField(max_length=255, blank=True, null=True)
    company = models.CharField(max_length=255, blank=True, null=True)
    department = models.CharField(max_length=255, blank=True, null=True)
    bio = models.TextField(max_length=500, blank=True, null=True)
    avatar_url = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.user.username}'s profile"

    def to_dict(self):
        return {
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'company': self.company,
            'department': self.department,
            'bio': self.bio,
            'avatar_url': self.avatar_url,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


class UserPreferences(models.Model):
    """How the assistant should write documents and talk to this user"""
    DEFAULT_PRD_TEMPLATE_STYLE = 'lean-startup'
    DEFAULT_SPEC_TEMPLATE_STYLE = 'technical-detailed'
    DEFAULT_COMMUNICATION_STYLE = 'concise'

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='preferences')
    prd_template_style = models.CharField(max_length=100, blank=True, null=True, default=DEFAULT_PRD_TEMPLATE_STYLE)
    spec_template_style = models.CharField(max_length=100, blank=True, null=True, default=DEFAULT_SPEC_TEMPLATE_STYLE)
    communication_style = models.CharField(max_length=100, blank=True, null=True, default=DEFAULT_COMMUNICATION_STYLE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = 'user preferences'

    def __str__(self):
        return f"{self.user.username}'s preferences"

    def to_dict(self):
        return {
            'prd_template_style': self.prd_template_style,
            'spec_template_style': self.spec_template_style,
            'communication_style': self.communication_style,
        }


class CompanyInfo(models.Model):
    FIELDS = [
        'company_name',
        'industry',
        'size',
        'mission',
        'vision',
        'target_customers',
        'current_products',
        'key_competitors',
        'unique_value',
        'business_goals',
        'technical_stack',
        'challenges',
    ]

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='company_info')
    company_name = models.CharField(max_length=255, blank=True, null=True)
    industry = models.CharField(max_length=255, blank=True, null=True)
    size = models.CharField(max_length=100, blank=True, null=True)
    mission = models.TextField(blank=True, null=True)
    vision = models.TextField(blank=True, null=True)
    target_customers = models.TextField(blank=True, null=True)
    current_products = models.TextField(blank=True, null=True)
    key_competitors = models.TextField(blank=True, null=True)
    unique_value = models.TextField(blank=True, null=True)
    business_goals = models.TextField(blank=True, null=True)
    technical_stack = models.TextField(blank=True, null=True)
    challenges = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = 'company info'

    def __str__(self):
        return self.company_name or f"{self.user.username}'s company"

    def to_dict(self):
        return {field: getattr(self, field) for field in self.FIELDS}


@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        Profile.objects.create(user=instance, email=instance.email or None)
