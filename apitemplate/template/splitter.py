"""Split a raw template into its path, query and fragment regions."""


def split_template(template: str) -> tuple[str, str, str]:
    """Separate a template string into (path, query, fragment).

    A single leading '/' is dropped. The fragment is everything after the
    first '#', the query everything between the first '?' and the fragment.
    Any string is a valid split.

    Args:
        template: Raw template string

    Returns:
        Tuple of path template, query template and fragment
    """
    if template.startswith("/"):
        template = template[1:]

    remainder, _, fragment = template.partition("#")
    path, _, query = remainder.partition("?")
    return path, query, fragment
