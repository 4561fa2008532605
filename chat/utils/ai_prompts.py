from accounts.models import CompanyInfo, UserPreferences


BASE_PROMPT = """You are PMPanda's AI product manager assistant. Help users develop product requirements documents (PRDs), technical specifications, and provide strategic product management guidance. Be concise, actionable, and maintain awareness of the product context."""

PROJECT_PROMPT = """You are currently working on project ID: {project_id} ("{project_name}"). You have access to tools to update the PRD and Spec documents. When the user asks you to write or update these documents, use the appropriate tools to save the content. Always send the complete document, not a diff."""


def get_system_prompt(user=None, project=None):
    """
    Build the system prompt for a chat turn.

    Adds the project being edited and whatever the user told us about
    themselves and their company.
    """
    sections = [BASE_PROMPT]

    if project is not None:
        sections.append(PROJECT_PROMPT.format(project_id=project.id, project_name=project.name))

    if user is not None and user.is_authenticated:
        preferences = UserPreferences.objects.filter(user=user).first()
        if preferences:
            lines = _bullet_lines([
                ("Communication style", preferences.communication_style),
                ("PRD template style", preferences.prd_template_style),
                ("Spec template style", preferences.spec_template_style),
            ])
            if lines:
                sections.append("## User preferences\n" + lines)

        company = CompanyInfo.objects.filter(user=user).first()
        if company:
            lines = _bullet_lines(
                (field.replace('_', ' ').capitalize(), value)
                for field, value in company.to_dict().items()
            )
            if lines:
                sections.append("## Company context\n" + lines)

    return "\n\n".join(sections)


def _bullet_lines(pairs):
    return "\n".join(f"- {label}: {value.strip()}" for label, value in pairs if value and value.strip())
