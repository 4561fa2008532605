import logging
from projects.models import Project

logger = logging.getLogger(__name__)


class ToolExecutionError(Exception):
    """A tool call the model requested could not be carried out"""


def app_functions(function_name, function_args, project_id):
    """
    Run a tool call requested by the AI against the given project.

    Returns a short message describing what was done, or None when the
    function name is not one of ours.
    """
    logger.debug(f"Function name: {function_name}")
    logger.debug(f"Function args: {list(function_args)}")

    match function_name:
        case "update_prd":
            return save_document("prd", function_args, project_id)
        case "update_spec":
            return save_document("spec", function_args, project_id)

    return None


def save_document(kind, function_args, project_id):
    """
    Replace the PRD or Spec of a project with the markdown the model wrote.
    """
    if project_id is None:
        raise ToolExecutionError(f"project_id is required to save the {kind.upper()}")

    content = function_args.get("content")
    if not isinstance(content, str):
        raise ToolExecutionError(f"'content' must be a string, got {type(content).__name__}")

    if not Project.write_document(project_id, kind, content):
        raise ToolExecutionError(f"Project with ID {project_id} does not exist")

    logger.info(f"{kind.upper()} updated for project {project_id} ({len(content)} chars)")
    return f"{Project.DOCUMENT_TITLES[kind]} saved"
