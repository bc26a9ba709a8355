"""Contains mappings of responses that API end points return."""

from typing import Any, Final, TypeAlias

Responses: TypeAlias = dict[int | str, dict[str, Any]]

AuthResponses: Final[Responses] = {
    401: {
        "description": (
            "Occurs when an invalid token is provided with the x-udf-samples-api "
            "header."
        ),
        "content": {
            "application/json": {
                "example": {"detail": "Not authorized"},
            },
        },
    },
}

GetSamplesResponses: Final[Responses] = {
    **AuthResponses,
    400: {
        "description": "The resource, action or filename parameter is invalid",
        "content": {
            "application/json": {
                "example": {
                    "examples": [
                        {"detail": "The resource parameter is required."},
                        {
                            "detail": (
                                "The action parameter is required for code "
                                "resource types."
                            )
                        },
                        {
                            "detail": (
                                "The filename parameter is required when action "
                                "is 'specific'."
                            )
                        },
                    ],
                },
            },
        },
    },
    404: {
        "description": (
            "Occurs in two cases:\n"
            "- When no sample files are catalogued for the resource and action\n"
            "- When the samples repository does not have the requested file"
        ),
        "content": {
            "application/json": {
                "example": {
                    "examples": [
                        {
                            "detail": (
                                "No files found for resource 'variablelibrary' "
                                "and action 'query'"
                            )
                        },
                        {
                            "detail": (
                                "Failed to fetch content from GitHub: 404 Not Found "
                                "for {url}"
                            )
                        },
                    ],
                },
            },
        },
    },
    502: {
        "description": "The samples repository could not be reached",
        "content": {
            "application/json": {
                "example": {
                    "detail": (
                        "Failed to fetch content from GitHub: Request to {url} "
                        "failed: {reason}"
                    )
                },
            },
        },
    },
    500: {
        "description": "Something unexpected has happened",
        "content": {
            "application/json": {
                "example": {"detail": "{string content of exception}"},
            },
        },
    },
}
