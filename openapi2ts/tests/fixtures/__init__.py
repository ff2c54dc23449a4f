"""Test fixtures for openapi2ts tests.

This module provides sample OpenAPI documents used across the test suite.
"""

import copy

# Minimal OpenAPI 3.0 document without schemas or paths
MINIMAL_OPENAPI_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

TODO_SCHEMAS = {
    'Todo': {
        'type': 'object',
        'required': ['id', 'title'],
        'properties': {
            'id': {'type': 'string'},
            'title': {'type': 'string'},
            'done': {'type': 'boolean'},
            'taxonomy/id': {'type': 'integer'},
        },
    },
    'TodoInput': {
        'type': 'object',
        'required': ['title'],
        'properties': {
            'title': {'type': 'string'},
            'done': {'type': 'boolean'},
        },
    },
    'Status': {'type': 'string', 'enum': ['open', 'closed']},
}


def _json(schema: dict) -> dict:
    return {'application/json': {'schema': schema}}


TODO_REF = {'$ref': '#/components/schemas/Todo'}
TODO_INPUT_REF = {'$ref': '#/components/schemas/TodoInput'}


def _todo_paths(with_operation_ids: bool) -> dict:
    def op_id(name: str) -> dict:
        return {'operationId': name} if with_operation_ids else {}

    id_param = {
        'name': 'id',
        'in': 'path',
        'required': True,
        'schema': {'type': 'string'},
    }
    return {
        '/todos': {
            'get': {
                **op_id('getTodos'),
                'summary': 'List todos',
                'responses': {
                    '200': {
                        'description': 'OK',
                        'content': _json({'type': 'array', 'items': TODO_REF}),
                    }
                },
            },
        },
        '/todos/{id}': {
            'parameters': [id_param],
            'get': {
                **op_id('getTodoById'),
                'responses': {'200': {'description': 'OK', 'content': _json(TODO_REF)}},
            },
            'put': {
                **op_id('updateTodo'),
                'requestBody': {'content': _json(TODO_INPUT_REF)},
                'responses': {'200': {'description': 'OK', 'content': _json(TODO_REF)}},
            },
            'delete': {
                **op_id('deleteTodo'),
                'responses': {'204': {'description': 'Deleted'}},
            },
        },
    }


# Todo API without operationIds: fallback method shapes
TODO_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Todo API', 'version': '1.0.0'},
    'servers': [
        {'url': 'https://api.example.com/v1'},
        {'url': 'http://localhost:8080'},
    ],
    'paths': _todo_paths(with_operation_ids=False),
    'components': {'schemas': copy.deepcopy(TODO_SCHEMAS)},
}

# Same API, every operation carrying an operationId
TODO_SPEC_WITH_OPERATION_IDS = {
    **TODO_SPEC,
    'paths': _todo_paths(with_operation_ids=True),
    'components': {'schemas': copy.deepcopy(TODO_SCHEMAS)},
}

# GET with one required and one optional query parameter
SEARCH_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Search API', 'version': '1.0.0'},
    'paths': {
        '/search': {
            'get': {
                'operationId': 'search',
                'parameters': [
                    {
                        'name': 'q',
                        'in': 'query',
                        'required': True,
                        'schema': {'type': 'string'},
                    },
                    {'name': 'limit', 'in': 'query', 'schema': {'type': 'integer'}},
                ],
                'responses': {
                    '200': {
                        'description': 'OK',
                        'content': _json({'type': 'array', 'items': {'type': 'string'}}),
                    }
                },
            }
        }
    },
}

# Operations requiring authentication
SECURED_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Secured API', 'version': '1.0.0'},
    'security': [{'bearerAuth': []}],
    'paths': {
        '/reports': {
            'get': {
                'operationId': 'listReports',
                'security': [{'basicAuth': []}],
                'responses': {'200': {'description': 'OK'}},
            },
            'post': {
                'operationId': 'createReport',
                'responses': {'201': {'description': 'Created'}},
            },
        },
        '/status': {
            'get': {
                'operationId': 'getStatus',
                'security': [],
                'responses': {'200': {'description': 'OK'}},
            }
        },
    },
    'components': {
        'securitySchemes': {
            'basicAuth': {'type': 'http', 'scheme': 'basic'},
            'bearerAuth': {'type': 'http', 'scheme': 'bearer'},
            'apiKey': {'type': 'apiKey', 'in': 'header', 'name': 'X-API-Key'},
            'oauth': {'type': 'oauth2', 'flows': {}},
            'oidc': {'type': 'openIdConnect', 'openIdConnectUrl': 'https://x'},
        }
    },
}

# Petstore-shaped document whose schema names clash with the client helpers
PETSTORE_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Swagger Petstore', 'version': '1.0.0'},
    'paths': {
        '/pet/{petId}/uploadImage': {
            'post': {
                'operationId': 'uploadFile',
                'parameters': [
                    {'name': 'petId', 'in': 'path', 'required': True},
                ],
                'responses': {
                    '200': {
                        'description': 'successful operation',
                        'content': {
                            'application/json': {
                                'schema': {'$ref': '#/components/schemas/ApiResponse'}
                            }
                        },
                    }
                },
            }
        },
        '/pet': {
            'get': {
                'operationId': 'listPets',
                'responses': {
                    '200': {
                        'description': 'OK',
                        'content': {
                            'application/json': {
                                'schema': {
                                    'type': 'array',
                                    'items': {'$ref': '#/components/schemas/Pet'},
                                }
                            }
                        },
                    }
                },
            }
        },
    },
    'components': {
        'schemas': {
            'Pet': {
                'type': 'object',
                'properties': {'name': {'type': 'string'}},
            },
            'ApiResponse': {
                'type': 'object',
                'properties': {
                    'code': {'type': 'integer'},
                    'message': {'type': 'string'},
                },
            },
            'ApiResponseModel': {'type': 'string'},
            'URL': {'type': 'string'},
        }
    },
}
