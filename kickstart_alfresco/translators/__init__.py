"""
Deterministic Translator Layer

Builds the Alfresco content model and Share module for a converted process.
No parsing or serialization happens here.
"""

from .initialize_models_listener import (
    InitializeAlfrescoModelsConversionListener, create_default_conversion
)

__all__ = ['InitializeAlfrescoModelsConversionListener', 'create_default_conversion']
