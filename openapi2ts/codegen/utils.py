import json
import re
from urllib.parse import urlparse

__all__ = (
    'is_url',
    'is_bare_identifier',
    'quote_property_name',
    'to_identifier',
    'RESERVED_WORDS',
    'ts_literal',
    'method_name',
    'ROOT_RESOURCE',
)

ROOT_RESOURCE = 'root'

_BARE_IDENTIFIER = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')
_WORD_SPLIT = re.compile(r'[^A-Za-z0-9]')

# words that cannot name a parameter in strict-mode TypeScript
RESERVED_WORDS = frozenset(
    (
        'arguments await break case catch class const continue debugger default '
        'delete do else enum eval export extends false finally for function if '
        'implements import in instanceof interface let new null package private '
        'protected public return static super switch this throw true try typeof '
        'var void while with yield'
    ).split()
)


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:].lower()


def is_url(text):
    try:
        result = urlparse(text)
        return result.scheme in ('http', 'https') and bool(result.netloc)
    except (TypeError, ValueError, AttributeError):
        return False


def is_bare_identifier(name: str) -> bool:
    """Check whether ``name`` can be used unquoted as a TypeScript key."""
    return bool(_BARE_IDENTIFIER.match(name))


def ts_literal(value) -> str:
    """Render a JSON value as a TypeScript literal.

    Strings become double-quoted literals, everything else is rendered the
    way JavaScript would stringify it (``true``, ``null``, ``1.5``).
    """
    return json.dumps(value, ensure_ascii=False)


def quote_property_name(name: str) -> str:
    """Quote a property or object key unless it is a bare identifier.

    - ``id`` stays ``id``
    - ``taxonomy/id`` becomes ``"taxonomy/id"``
    """
    if is_bare_identifier(name):
        return name
    return ts_literal(name)


def to_identifier(name: str) -> str:
    """Convert a parameter name into a valid TypeScript variable name.

    - Replace every invalid character with an underscore
    - Ensure it doesn't start with a digit
    - Append an underscore to reserved words (``default`` -> ``default_``)
    """
    sanitized = re.sub(r'[^A-Za-z0-9_$]', '_', name or '')
    if not sanitized:
        return '_'
    if sanitized[0].isdigit():
        sanitized = '_' + sanitized
    if sanitized in RESERVED_WORDS:
        sanitized += '_'
    return sanitized


def method_name(operation_id: str | None, fallback: str) -> str:
    """Derive a lowerCamelCase method name from an operationId.

    The operationId is split wherever a non-alphanumeric character occurs,
    the first fragment is lower-cased and every following fragment is
    capitalized. Without a usable operationId the fallback is returned
    unchanged.

    Examples:
        >>> method_name('get-user_by.id', 'get')
        'getUserById'
        >>> method_name('getTodos', 'queryParams')
        'gettodos'
        >>> method_name(None, 'queryParams')
        'queryParams'
    """
    if not operation_id or not isinstance(operation_id, str):
        return fallback

    words = [word for word in _WORD_SPLIT.split(operation_id) if word]
    if not words:
        return fallback

    name = words[0].lower() + ''.join(capitalize(word) for word in words[1:])
    if name[0].isdigit():
        name = '_' + name
    return name
