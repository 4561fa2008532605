update_prd = {
    "type": "function",
    "function": {
        "name": "update_prd",
        "description": "Update the Product Requirements Document (PRD) markdown content for the current project. Use this when the user asks you to write, update, or modify the PRD.",
        "parameters": {
            "type": "object",
            "properties": {
                "content": {
                    "type": "string",
                    "description": "The full markdown content for the PRD"
                }
            },
            "required": ["content"],
            "additionalProperties": False,
        }
    }
}

update_spec = {
    "type": "function",
    "function": {
        "name": "update_spec",
        "description": "Update the Technical Specification (Spec) markdown content for the current project. Use this when the user asks you to write, update, or modify the technical spec.",
        "parameters": {
            "type": "object",
            "properties": {
                "content": {
                    "type": "string",
                    "description": "The full markdown content for the Spec"
                }
            },
            "required": ["content"],
            "additionalProperties": False,
        }
    }
}

tools_project = [update_prd, update_spec]
