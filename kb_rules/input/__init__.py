"""
Input access utilities.

This package contains the collaborators that enumerate and read
markdown source documents.
"""

from .loader import document_name, list_documents, read_document

__all__ = ["list_documents", "read_document", "document_name"]
