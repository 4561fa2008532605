from io import StringIO
from unittest import mock

from django.contrib.auth.models import User
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase, override_settings

from projects.models import Project
from tests.helpers import sse, content_chunk, tool_chunk, FakeStreamResponse


@override_settings(AI_GATEWAY_API_KEY='test-key')
class AskCommandTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='pm', email='pm@example.com', password='pw')
        self.project = Project.objects.create(owner=self.user, name='Search')

    @mock.patch('chat.utils.ai_providers.requests.post')
    def test_streams_answer_and_reports_tools(self, post):
        post.return_value = FakeStreamResponse([
            sse(content_chunk('Writing ')),
            sse(content_chunk('it now.')),
            sse(tool_chunk(call_id='c1', name='update_spec', arguments='{"content": "# Search spec"}', finish_reason='tool_calls')),
            sse('[DONE]'),
        ])
        out = StringIO()

        call_command('ask', 'Draft the spec', '--user', 'pm@example.com', '--project', str(self.project.id), stdout=out, no_color=True)

        self.assertIn('Writing it now.', out.getvalue())
        self.assertIn('update_spec: Technical Specification saved', out.getvalue())
        self.project.refresh_from_db()
        self.assertEqual(self.project.spec_content, '# Search spec')
        self.assertIn('tools', post.call_args.kwargs['json'])

    @mock.patch('chat.utils.ai_providers.requests.post')
    def test_gateway_refusal(self, post):
        post.return_value = FakeStreamResponse([], status_code=429)

        with self.assertRaisesMessage(CommandError, 'Rate limits exceeded'):
            call_command('ask', 'hi', '--user', 'pm', stdout=StringIO())

    def test_unknown_user_and_project(self):
        with self.assertRaises(CommandError):
            call_command('ask', 'hi', '--user', 'nobody', stdout=StringIO())
        with self.assertRaises(CommandError):
            call_command('ask', 'hi', '--user', 'pm', '--project', str(self.project.id + 1), stdout=StringIO())
