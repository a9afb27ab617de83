"""Input loading exports."""

from .document_loader import DocumentLoadError, LoadedDocument, load_document, load_documents

__all__ = ["DocumentLoadError", "LoadedDocument", "load_document", "load_documents"]
