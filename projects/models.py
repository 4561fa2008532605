from django.db import models
from django.contrib.auth.models import User
from django.utils import timezone


class Project(models.Model):
    TYPE_CHOICES = [
        ('feature', 'Feature'),
        ('technical', 'Technical'),
        ('improvement', 'Improvement'),
    ]
    STATUS_CHOICES = [
        ('planning', 'Planning'),
        ('in-progress', 'In Progress'),
        ('completed', 'Completed'),
    ]
    PRIORITY_CHOICES = [
        ('P0', 'P0 - Critical'),
        ('P1', 'P1 - High'),
        ('P2', 'P2 - Medium'),
        ('P3', 'P3 - Low'),
    ]

    # Document kind -> field holding its markdown
    DOCUMENT_FIELDS = {
        'prd': 'prd_content',
        'spec': 'spec_content',
    }
    DOCUMENT_TITLES = {
        'prd': 'Product Requirements Document',
        'spec': 'Technical Specification',
    }

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    owner = models.ForeignKey(User, on_delete=models.CASCADE, related_name="projects")
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default='feature')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='planning')
    priority = models.CharField(max_length=2, choices=PRIORITY_CHOICES, default='P2')
    quarter = models.CharField(max_length=20, blank=True, default='')
    prd_content = models.TextField(blank=True, null=True)
    spec_content = models.TextField(blank=True, null=True)
    display_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['display_order', 'created_at']

    def __str__(self):
        return self.name

    def get_document(self, kind):
        return getattr(self, self.DOCUMENT_FIELDS[kind]) or ''

    @classmethod
    def write_document(cls, project_id, kind, content):
        """
        Overwrite one document of a project with a single UPDATE.

        Returns the number of rows written (0 when the project is gone).
        """
        field = cls.DOCUMENT_FIELDS[kind]
        return cls.objects.filter(id=project_id).update(**{field: content, 'updated_at': timezone.now()})

    def to_dict(self, include_documents=False):
        data = {
            'id': self.id,
            'name': self.name,
            'description': self.description or '',
            'type': self.type,
            'status': self.status,
            'priority': self.priority,
            'quarter': self.quarter,
            'display_order': self.display_order,
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }
        if include_documents:
            data['prd'] = self.prd_content or ''
            data['spec'] = self.spec_content or ''
        return data
