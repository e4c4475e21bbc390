# utils/method_override.py

from urllib.parse import parse_qs


class MethodOverrideMiddleware:
    """
    WSGI middleware letting a POST be dispatched as PATCH, PUT or DELETE.

    The target method comes from the ``_method`` query parameter or the
    ``X-HTTP-Method-Override`` header. The request body is left untouched.
    """

    allowed_methods = frozenset(["PATCH", "PUT", "DELETE"])

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST":
            method = environ.get("HTTP_X_HTTP_METHOD_OVERRIDE", "")
            if not method:
                query = parse_qs(environ.get("QUERY_STRING", ""))
                method = query.get("_method", [""])[0]
            method = method.upper()
            if method in self.allowed_methods:
                environ["REQUEST_METHOD"] = method
        return self.app(environ, start_response)
