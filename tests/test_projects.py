import json

from django.contrib.auth.models import User
from django.test import TestCase

from documents.defaults import DEFAULT_PRD_TEMPLATE, DEFAULT_SPEC_TEMPLATE
from documents.models import DocumentTemplate
from projects.models import Project


class ProjectApiTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='pm@example.com', password='pw')
        self.client.force_login(self.user)

    def post_json(self, url, body):
        return self.client.post(url, data=json.dumps(body), content_type='application/json')

    def make_projects(self, *names):
        return [
            Project.objects.create(owner=self.user, name=name, display_order=order)
            for order, name in enumerate(names)
        ]

    def test_create_seeds_documents_from_defaults(self):
        response = self.post_json('/projects/', {'name': '  Onboarding  ', 'type': 'improvement', 'quarter': 'Q1 2025'})

        self.assertEqual(response.status_code, 201)
        project = response.json()['project']
        self.assertEqual(project['name'], 'Onboarding')
        self.assertEqual(project['priority'], 'P2')
        self.assertEqual(project['status'], 'planning')
        self.assertEqual(project['prd'], DEFAULT_PRD_TEMPLATE)
        self.assertEqual(project['spec'], DEFAULT_SPEC_TEMPLATE)

    def test_create_uses_saved_template_and_next_order(self):
        DocumentTemplate.objects.create(user=self.user, type='prd', content='# Our PRD')
        self.make_projects('First', 'Second')

        project = self.post_json('/projects/', {'name': 'Third'}).json()['project']

        self.assertEqual(project['prd'], '# Our PRD')
        self.assertEqual(project['spec'], DEFAULT_SPEC_TEMPLATE)
        self.assertEqual(project['display_order'], 2)

    def test_create_requires_name(self):
        response = self.post_json('/projects/', {'name': '   '})

        self.assertEqual(response.status_code, 400)
        self.assertIn('name', response.json()['errors'])

    def test_create_rejects_unknown_priority(self):
        response = self.post_json('/projects/', {'name': 'X', 'priority': 'P9'})
        self.assertEqual(response.status_code, 400)

    def test_list_only_own_projects_in_display_order(self):
        Project.objects.create(owner=self.user, name='Later', display_order=5)
        Project.objects.create(owner=self.user, name='Sooner', display_order=1)
        other = User.objects.create_user(username='other@example.com', password='pw')
        Project.objects.create(owner=other, name='Not mine')

        names = [p['name'] for p in self.client.get('/projects/').json()['projects']]

        self.assertEqual(names, ['Sooner', 'Later'])

    def test_partial_update_keeps_other_fields(self):
        project = Project.objects.create(owner=self.user, name='API', priority='P0', quarter='Q2 2025')

        response = self.post_json(f'/projects/{project.id}/', {'status': 'in-progress'})

        self.assertEqual(response.status_code, 200)
        project.refresh_from_db()
        self.assertEqual(project.status, 'in-progress')
        self.assertEqual(project.priority, 'P0')
        self.assertEqual(project.quarter, 'Q2 2025')

    def test_delete(self):
        project = Project.objects.create(owner=self.user, name='Old')

        response = self.client.delete(f'/projects/{project.id}/')

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()['success'])
        self.assertFalse(Project.objects.exists())

    def test_other_users_project_is_not_found(self):
        other = User.objects.create_user(username='other@example.com', password='pw')
        project = Project.objects.create(owner=other, name='Secret')

        self.assertEqual(self.client.get(f'/projects/{project.id}/').status_code, 404)
        self.assertEqual(self.client.delete(f'/projects/{project.id}/').status_code, 404)
        self.assertEqual(self.client.get(f'/projects/{project.id}/api/prd/').status_code, 404)
        self.assertTrue(Project.objects.filter(id=project.id).exists())

    def test_reorder(self):
        self.make_projects('A', 'B', 'C')

        response = self.post_json('/projects/reorder/', {'from_index': 0, 'to_index': 2})

        self.assertEqual(response.status_code, 200)
        self.assertEqual([p['name'] for p in response.json()['projects']], ['B', 'C', 'A'])
        self.assertEqual(
            list(Project.objects.values_list('name', 'display_order')),
            [('B', 0), ('C', 1), ('A', 2)]
        )

    def test_reorder_out_of_range(self):
        self.make_projects('A', 'B')

        self.assertEqual(self.post_json('/projects/reorder/', {'from_index': 0, 'to_index': 2}).status_code, 400)
        self.assertEqual(self.post_json('/projects/reorder/', {'from_index': 'x'}).status_code, 400)

    def test_document_read_and_write(self):
        project = Project.objects.create(owner=self.user, name='Docs', spec_content='old spec')
        url = f'/projects/{project.id}/api/spec/'

        data = self.client.get(url).json()
        self.assertEqual(data['content'], 'old spec')
        self.assertEqual(data['title'], 'Technical Specification')

        response = self.post_json(url, {'content': '# New spec'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['content'], '# New spec')
        project.refresh_from_db()
        self.assertEqual(project.spec_content, '# New spec')

    def test_document_validation(self):
        project = Project.objects.create(owner=self.user, name='Docs')

        self.assertEqual(self.client.get(f'/projects/{project.id}/api/roadmap/').status_code, 404)
        self.assertEqual(self.post_json(f'/projects/{project.id}/api/prd/', {'content': 42}).status_code, 400)

    def test_preview_renders_markdown(self):
        project = Project.objects.create(
            owner=self.user, name='Docs',
            prd_content='# Goals\n\n| a | b |\n|---|---|\n| 1 | 2 |\n\n```\ncode\n```\n'
        )

        html = self.client.get(f'/projects/{project.id}/api/prd/preview/').json()['html']

        self.assertIn('<h1>Goals</h1>', html)
        self.assertIn('<table>', html)
        self.assertIn('<code>', html)

    def test_roadmap_groups_by_quarter(self):
        Project.objects.create(owner=self.user, name='Someday')
        Project.objects.create(owner=self.user, name='Next year', quarter='Q1 2026')
        Project.objects.create(owner=self.user, name='This fall', quarter='Q4 2025')
        Project.objects.create(owner=self.user, name='Also fall', quarter='Q4 2025', display_order=1)

        quarters = self.client.get('/projects/roadmap/').json()['quarters']

        self.assertEqual([q['quarter'] for q in quarters], ['Q4 2025', 'Q1 2026', 'Unscheduled'])
        self.assertEqual([p['name'] for p in quarters[0]['projects']], ['This fall', 'Also fall'])

    def test_roadmap_puts_unparsable_quarters_under_unscheduled(self):
        Project.objects.create(owner=self.user, name='Someday', quarter='Later')
        Project.objects.create(owner=self.user, name='Backlog', display_order=1)
        Project.objects.create(owner=self.user, name='Lowercase', quarter='q2 2025')
        Project.objects.create(owner=self.user, name='Uppercase', quarter='Q2 2025', display_order=1)

        quarters = self.client.get('/projects/roadmap/').json()['quarters']

        self.assertEqual([q['quarter'] for q in quarters], ['Q2 2025', 'Unscheduled'])
        self.assertEqual([p['name'] for p in quarters[0]['projects']], ['Lowercase', 'Uppercase'])
        self.assertEqual([p['name'] for p in quarters[1]['projects']], ['Someday', 'Backlog'])

    def test_requires_login(self):
        self.client.logout()
        self.assertEqual(self.client.get('/projects/').status_code, 302)


class ProjectModelTests(TestCase):

    def test_write_document(self):
        user = User.objects.create_user(username='pm', password='pw')
        project = Project.objects.create(owner=user, name='P')

        self.assertEqual(Project.write_document(project.id, 'prd', '# PRD'), 1)
        self.assertEqual(Project.write_document(project.id + 100, 'prd', '# PRD'), 0)

        project.refresh_from_db()
        self.assertEqual(project.get_document('prd'), '# PRD')
        self.assertEqual(project.get_document('spec'), '')
