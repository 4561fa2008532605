from django.db import models
from django.contrib.auth.models import User

from .defaults import DEFAULT_PRD_TEMPLATE, DEFAULT_SPEC_TEMPLATE


class DocumentTemplate(models.Model):
    TYPE_PRD = 'prd'
    TYPE_SPEC = 'spec'
    TYPE_CHOICES = [
        (TYPE_PRD, 'Product Requirements Document'),
        (TYPE_SPEC, 'Technical Specification'),
    ]
    DEFAULTS = {
        TYPE_PRD: DEFAULT_PRD_TEMPLATE,
        TYPE_SPEC: DEFAULT_SPEC_TEMPLATE,
    }

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='document_templates')
    type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    content = models.TextField()
    is_default = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['user', 'type'], name='unique_template_per_user_and_type'),
        ]

    def __str__(self):
        return f"{self.user.username} - {self.type.upper()} template"

    @classmethod
    def get_content(cls, user, template_type):
        """Return the user's saved template, or the built-in default"""
        template = cls.objects.filter(user=user, type=template_type).first()
        if template:
            return template.content
        return cls.DEFAULTS[template_type]
