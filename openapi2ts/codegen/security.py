"""Human-readable security requirements for generated documentation."""

from openapi2ts.codegen.document import OpenAPIDocument, OperationRecord

__all__ = ['resolve_security', 'describe_scheme']


def describe_scheme(scheme_name: str, scheme: dict, scopes) -> str:
    """Render one security scheme as a label such as ``Bearer Token``."""
    scheme_type = scheme.get('type')

    if scheme_type == 'http':
        variant = scheme.get('scheme')
        if variant == 'basic':
            return 'Basic Authentication'
        if variant == 'bearer':
            return 'Bearer Token'
        return f'HTTP {str(variant).upper()}' if variant else 'HTTP'

    if scheme_type == 'apiKey':
        return f"API Key ({scheme.get('in')}: {scheme.get('name')})"

    if scheme_type == 'oauth2':
        if isinstance(scopes, list) and scopes:
            return f"OAuth2 ({', '.join(str(scope) for scope in scopes)})"
        return 'OAuth2'

    if scheme_type == 'openIdConnect':
        return 'OpenID Connect'

    return scheme_name


def resolve_security(
    operation: OperationRecord, document: OpenAPIDocument
) -> list[str]:
    """List the authentication an operation requires.

    The operation's own requirements win, including an explicit empty list;
    otherwise the document's global requirements apply. Schemes missing from
    ``components.securitySchemes`` are skipped.

    Args:
        operation: The operation to describe.
        document: The document holding the scheme registry.

    Returns:
        One label per (requirement, scheme) pair, in declaration order.
    """
    requirements = operation.security
    if requirements is None:
        requirements = document.security or []

    registry = document.security_schemes
    labels = []

    for requirement in requirements:
        if not isinstance(requirement, dict):
            continue
        for scheme_name, scopes in requirement.items():
            scheme = registry.get(scheme_name)
            if not isinstance(scheme, dict):
                continue
            labels.append(describe_scheme(scheme_name, scheme, scopes))

    return labels
