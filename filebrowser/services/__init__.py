"""
Service modules for business logic.
"""
from .file_service import FileService
from . import response_encoder

__all__ = [
    "FileService",
    "response_encoder",
]
