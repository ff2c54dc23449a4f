"""Path analysis for client generation.

Every (path, verb) pair of the document is classified into a ``PathInfo``:
the resource the path addresses, whether it targets a collection or a single
resource, and the names of its path parameters. ``group_paths_by_resource``
then buckets the records by verb and resource for the client emitter.
"""

import dataclasses
import re
from collections.abc import Iterable

from openapi2ts.codegen.document import OpenAPIDocument, OperationRecord
from openapi2ts.codegen.utils import ROOT_RESOURCE

__all__ = [
    'PathInfo',
    'ResourceGroups',
    'analyze_path',
    'collect_path_infos',
    'group_paths_by_resource',
    'normalize_resource_name',
]

_PATH_PARAM = re.compile(r'\{([^}]+)\}')


@dataclasses.dataclass(frozen=True)
class PathInfo:
    """Structural information about one operation's path.

    Attributes:
        path: The path template.
        method: The HTTP verb, lower-case.
        operation: The operation the path belongs to.
        resource_name: The last literal path segment, or ``root``.
        is_resource: True when the template has a placeholder.
        path_params: Placeholder names in template order, duplicates kept.
    """

    path: str
    method: str
    operation: OperationRecord
    resource_name: str
    is_resource: bool
    path_params: tuple[str, ...] = ()

    @property
    def is_collection(self) -> bool:
        return not self.is_resource


ResourceGroups = dict[str, dict[str, list[PathInfo]]]


def analyze_path(path: str, method: str, operation: OperationRecord) -> PathInfo:
    segments = [
        segment for segment in path.split('/') if segment and not segment.startswith('{')
    ]

    return PathInfo(
        path=path,
        method=method.lower(),
        operation=operation,
        resource_name=segments[-1] if segments else ROOT_RESOURCE,
        is_resource='{' in path,
        path_params=tuple(_PATH_PARAM.findall(path)),
    )


def collect_path_infos(document: OpenAPIDocument) -> list[PathInfo]:
    """Analyze every operation of the document, in document order."""
    return [
        analyze_path(operation.path, operation.method, operation)
        for operation in document.operations()
    ]


def normalize_resource_name(name: str) -> str:
    """Make a resource name usable as an identifier.

    Periods and hyphens become underscores and the result is lower-cased.
    """
    return name.replace('.', '_').replace('-', '_').lower()


def group_paths_by_resource(path_infos: Iterable[PathInfo]) -> ResourceGroups:
    """Group path records by verb, then by normalized resource name.

    Insertion order follows the input, so iterating the result visits verbs
    and resources in the order they first appear in the document.
    """
    groups: ResourceGroups = {}

    for path_info in path_infos:
        by_resource = groups.setdefault(path_info.method, {})
        by_resource.setdefault(
            normalize_resource_name(path_info.resource_name), []
        ).append(path_info)

    return groups
