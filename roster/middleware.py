# =============================================================================
# File: roster/middleware.py
# Purpose: Let HTML forms send PUT/PATCH/DELETE by POSTing a "_method" field.
# =============================================================================
from __future__ import annotations

import io

from werkzeug.formparser import parse_form_data
from werkzeug.wsgi import get_input_stream

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
OVERRIDE_HEADER = "HTTP_X_HTTP_METHOD_OVERRIDE"


class MethodOverrideMiddleware:
    """
    WSGI middleware rewriting POST requests to the method they ask for.

    The method is taken from the X-HTTP-Method-Override header, or from a
    "_method" field in a url-encoded or multipart form body. The body is
    buffered and put back so Flask can still parse the form.
    """

    allowed_methods = frozenset(["PUT", "PATCH", "DELETE"])

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST":
            method = self._requested_method(environ)
            if method in self.allowed_methods:
                environ["REQUEST_METHOD"] = method
        return self.app(environ, start_response)

    def _requested_method(self, environ) -> str:
        header = environ.get(OVERRIDE_HEADER)
        if header:
            return header.upper()

        content_type = environ.get("CONTENT_TYPE", "")
        if not content_type.startswith(FORM_CONTENT_TYPES):
            return ""

        body = get_input_stream(environ).read()
        environ["wsgi.input"] = io.BytesIO(body)
        environ["CONTENT_LENGTH"] = str(len(body))

        # Parse a copy so the real input stream stays unread
        form_environ = dict(environ)
        form_environ["wsgi.input"] = io.BytesIO(body)
        _, form, _ = parse_form_data(form_environ)
        return form.get("_method", "").upper()
