from .errors import error_response, engine_error_response
