import json


def load_json_body(request):
    """
    Decode a JSON object from the request body.

    Raises ValueError when the body is not a JSON object.
    """
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid JSON body: {e}")
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def form_errors(form):
    """Flatten form errors into a {field: [messages]} dict"""
    return {field: [str(e) for e in errors] for field, errors in form.errors.items()}
