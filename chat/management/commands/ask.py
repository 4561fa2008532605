from django.contrib.auth.models import User
from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from projects.models import Project
from chat.utils import (
    AIProvider, GatewayError, ChatStreamRelay, get_system_prompt, iter_assistant_text, tools_project
)


class Command(BaseCommand):
    help = "Ask the AI assistant a question from the terminal, optionally about one project"

    def add_arguments(self, parser):
        parser.add_argument('message', help='What to ask the assistant')
        parser.add_argument('--user', required=True, help='Email or username of the account to act as')
        parser.add_argument('--project', type=int, help='Project ID whose PRD and Spec the assistant may rewrite')

    def handle(self, *args, **options):
        user = User.objects.filter(username=options['user']).first() or \
            User.objects.filter(email=options['user']).first()
        if user is None:
            raise CommandError(f"No user '{options['user']}'")

        project = None
        if options.get('project'):
            project = Project.objects.filter(id=options['project'], owner=user).first()
            if project is None:
                raise CommandError(f"Project {options['project']} not found for {user.username}")

        messages = [
            {"role": "system", "content": get_system_prompt(user, project)},
            {"role": "user", "content": options['message']},
        ]

        try:
            provider = AIProvider.get_provider()
            response = provider.open_stream(messages, tools=tools_project if project else None)
        except (GatewayError, ImproperlyConfigured) as e:
            raise CommandError(str(e))

        relay = ChatStreamRelay(response, project_id=project.id if project else None)
        for fragment in iter_assistant_text(relay):
            self.stdout.write(fragment, ending='')
            self.stdout.flush()
        self.stdout.write('')

        for name, ok, detail in relay.tool_results:
            style = self.style.SUCCESS if ok else self.style.ERROR
            self.stdout.write(style(f"{name}: {detail}"))
