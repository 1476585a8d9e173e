"""
Alfresco artifact generation for kickstart workflow conversions.
"""

from kickstart_alfresco.config import ConversionSettings, configure_logging
from kickstart_alfresco.services.conversion import (
    WorkflowDefinitionConversion, WorkflowDefinitionConversionListener,
    AlfrescoConversionError, ConversionArtifactMissingError
)
from kickstart_alfresco.translators import (
    InitializeAlfrescoModelsConversionListener, create_default_conversion
)

__version__ = "0.1.0"

__all__ = [
    'WorkflowDefinitionConversion', 'WorkflowDefinitionConversionListener',
    'AlfrescoConversionError', 'ConversionArtifactMissingError',
    'InitializeAlfrescoModelsConversionListener', 'create_default_conversion',
    'ConversionSettings', 'configure_logging',
]
