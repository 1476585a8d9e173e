"""
Workflow Definition Conversion

Holds the state of a single conversion run: the workflow definition, the
process graph built from it and the artifacts generated along the way.
Listeners are called around the step conversion and share this object.
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from kickstart_alfresco.schemas.process_flow import (
    WorkflowDefinition, Process, validate_process_graph
)

logger = logging.getLogger(__name__)


class AlfrescoConversionError(Exception):
    """Raised when a conversion run cannot complete"""
    pass


class ConversionArtifactMissingError(AlfrescoConversionError):
    """Raised when a listener asks for an artifact no earlier phase stored"""
    pass


StepConverter = Callable[["WorkflowDefinitionConversion", Dict[str, Any]], None]


class WorkflowDefinitionConversionListener:
    """Hooks invoked before and after the workflow steps are converted."""

    def before_steps_conversion(self, conversion: "WorkflowDefinitionConversion") -> None:
        pass

    def after_steps_conversion(self, conversion: "WorkflowDefinitionConversion") -> None:
        pass


class WorkflowDefinitionConversion:
    """
    Conversion context for one workflow definition.

    Created at the start of a run, passed to every listener and step
    converter, and dropped once convert() returns.
    """

    def __init__(self, workflow_definition: WorkflowDefinition,
                 listeners: Optional[List[WorkflowDefinitionConversionListener]] = None,
                 step_converters: Optional[List[StepConverter]] = None):
        self.workflow_definition = workflow_definition
        self.listeners: List[WorkflowDefinitionConversionListener] = list(listeners or [])
        self.step_converters: List[StepConverter] = list(step_converters or [])
        self.process: Optional[Process] = None
        self.artifacts: Dict[str, Any] = {}

    def set_artifact(self, key: str, value: Any) -> None:
        self.artifacts[key] = value

    def get_artifact(self, key: str) -> Any:
        return self.artifacts.get(key)

    def convert(self) -> Process:
        """
        Run the full conversion pass.

        Returns:
            Process: the process graph after all listeners ran
        """
        if self.process is None:
            self.process = Process(
                id=self.workflow_definition.id,
                name=self.workflow_definition.name
            )

        try:
            for listener in self.listeners:
                listener.before_steps_conversion(self)

            for step in self.workflow_definition.steps:
                for step_converter in self.step_converters:
                    step_converter(self, step)

            validation_errors = validate_process_graph(self.process)
            if validation_errors:
                logger.warning(f"Process graph has validation warnings: {'; '.join(validation_errors)}")

            for listener in self.listeners:
                listener.after_steps_conversion(self)

        except AlfrescoConversionError:
            logger.error(f"Conversion of workflow definition '{self.workflow_definition.id}' aborted")
            raise
        except Exception as e:
            logger.error(f"Conversion of workflow definition '{self.workflow_definition.id}' failed: {e}")
            raise AlfrescoConversionError(f"Failed to convert workflow definition: {str(e)}") from e

        logger.info(f"Converted workflow definition into process '{self.process.id}'")
        return self.process
