"""Exception hierarchy for template construction errors.

All template errors inherit from TemplateError, which carries a stable
error_code so callers can tell which parsing rule was violated without
matching on message text.
"""


class TemplateError(Exception):
    """Base exception for all template errors."""

    error_code: str = "TEMPLATE_ERROR"

    def __init__(self, message: str, template: str | None = None) -> None:
        self.message = message
        self.template = template
        if template is not None:
            message = f"{message} (template: {template!r})"
        super().__init__(message)


class MalformedTemplateError(TemplateError, ValueError):
    """Raised when a template string doesn't match the templating rules."""

    error_code = "MALFORMED_TEMPLATE"


class MissingTemplateError(MalformedTemplateError):
    """Raised when no template string is given."""

    error_code = "MISSING_TEMPLATE"


class UnbalancedBracesError(MalformedTemplateError):
    """Raised when a '{' in the path has no matching '}'."""

    error_code = "UNBALANCED_BRACES"


class MalformedQueryError(MalformedTemplateError):
    """Raised when a query clause lacks '=' or has an empty name."""

    error_code = "MALFORMED_QUERY"


class DuplicateVariableError(MalformedTemplateError):
    """Raised when a variable name appears more than once in a template."""

    error_code = "DUPLICATE_VARIABLE"

    def __init__(self, name: str, template: str | None = None) -> None:
        self.name = name
        super().__init__(f"Duplicate variable name: {name!r}", template)


class EmptyVariableNameError(MalformedTemplateError):
    """Raised when a path placeholder encloses no variable name."""

    error_code = "EMPTY_VARIABLE_NAME"
