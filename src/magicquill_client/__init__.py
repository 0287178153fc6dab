"""
MagicQuill client

Python client for the HTTP endpoints of a MagicQuill image-generation backend.
"""

from magicquill_client.client import MagicQuillClient
from magicquill_client.errors import (EndpointNotAvailableError,
                                      InvalidImageError, MagicQuillAPIError,
                                      MagicQuillConnectionError,
                                      MagicQuillError)
from magicquill_client.schemas import (FromBackend, FromFrontend,
                                       GenerateParams, GenerateRequest,
                                       GenerateResponse, PromptGuessRequest)

__all__ = [
    'MagicQuillClient',
    'MagicQuillError',
    'MagicQuillAPIError',
    'EndpointNotAvailableError',
    'MagicQuillConnectionError',
    'InvalidImageError',
    'PromptGuessRequest',
    'FromFrontend',
    'FromBackend',
    'GenerateParams',
    'GenerateRequest',
    'GenerateResponse',
]
__version__ = '0.1.0'
