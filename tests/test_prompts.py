from django.contrib.auth.models import User
from django.test import TestCase

from accounts.models import CompanyInfo, UserPreferences
from chat.utils.ai_prompts import get_system_prompt, BASE_PROMPT
from projects.models import Project


class SystemPromptTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='pm@example.com', password='pw')

    def test_base_prompt_only(self):
        self.assertEqual(get_system_prompt(), BASE_PROMPT)
        self.assertEqual(get_system_prompt(self.user), BASE_PROMPT)

    def test_project_prompt(self):
        project = Project.objects.create(owner=self.user, name='Checkout')

        prompt = get_system_prompt(self.user, project)

        self.assertIn(f'project ID: {project.id} ("Checkout")', prompt)
        self.assertIn('tools', prompt)

    def test_preferences_and_company_context(self):
        UserPreferences.objects.create(user=self.user, communication_style='detailed', spec_template_style='')
        CompanyInfo.objects.create(user=self.user, company_name='Acme', technical_stack='Django, Postgres', mission='  ')

        prompt = get_system_prompt(self.user)

        self.assertIn('## User preferences\n- Communication style: detailed\n- PRD template style: lean-startup', prompt)
        self.assertNotIn('Spec template style', prompt)
        self.assertIn('## Company context\n- Company name: Acme\n- Technical stack: Django, Postgres', prompt)
        self.assertNotIn('Mission', prompt)
