"""
Alfresco Models Initialization

Conversion listener that creates the content model and the Share module
before the workflow steps are converted, so step converters can add their
types and form configuration to them, and wires the default start form
once the process graph is complete.
"""

from typing import Optional
import logging

from kickstart_alfresco.config import ConversionSettings
from kickstart_alfresco.schemas.process_flow import WorkflowDefinition
from kickstart_alfresco.services.conversion import (
    WorkflowDefinitionConversion, WorkflowDefinitionConversionListener
)
from kickstart_alfresco.services.process_id import assign_process_id
from kickstart_alfresco.translators.content_model_builder import add_content_model
from kickstart_alfresco.translators.default_form import enrich_start_events
from kickstart_alfresco.translators.form_module_builder import add_module

logger = logging.getLogger(__name__)


class InitializeAlfrescoModelsConversionListener(WorkflowDefinitionConversionListener):
    """
    Creates the Alfresco artifacts shared by the rest of the conversion.
    """

    def __init__(self, settings: Optional[ConversionSettings] = None):
        self.settings = settings or ConversionSettings.from_env()

    def before_steps_conversion(self, conversion: WorkflowDefinitionConversion) -> None:
        process_id = assign_process_id(conversion)
        add_content_model(
            conversion, process_id,
            author=self.settings.model_author,
            version=self.settings.model_version
        )
        add_module(conversion, process_id)

    def after_steps_conversion(self, conversion: WorkflowDefinitionConversion) -> None:
        enriched = enrich_start_events(conversion)
        if len(enriched) > 1:
            logger.warning(
                f"Process '{conversion.process.id}' has {len(enriched)} start events without form; "
                f"each adds its own details-form configuration"
            )


def create_default_conversion(workflow_definition: WorkflowDefinition,
                              settings: Optional[ConversionSettings] = None) -> WorkflowDefinitionConversion:
    """Conversion with the Alfresco models listener registered."""
    return WorkflowDefinitionConversion(
        workflow_definition,
        listeners=[InitializeAlfrescoModelsConversionListener(settings)]
    )
