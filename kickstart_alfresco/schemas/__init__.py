"""
Schema Layer

Pydantic models for the process graph and for the Alfresco artifacts
generated from it.
"""

from .process_flow import (
    WorkflowDefinition, Process, FlowElement, FlowElementType,
    StartEvent, EndEvent, UserTask, ScriptTask, SequenceFlow,
    ParallelGateway, ExclusiveGateway, validate_process_graph
)
from .content_model import M2Model, M2Namespace
from .module_config import (
    Module, Configuration, Form, FormFieldVisibility, FormAppearance,
    FormSet, FormField, FormFieldControl, FormFieldControlParameter
)

__all__ = [
    'WorkflowDefinition', 'Process', 'FlowElement', 'FlowElementType',
    'StartEvent', 'EndEvent', 'UserTask', 'ScriptTask', 'SequenceFlow',
    'ParallelGateway', 'ExclusiveGateway', 'validate_process_graph',
    'M2Model', 'M2Namespace',
    'Module', 'Configuration', 'Form', 'FormFieldVisibility', 'FormAppearance',
    'FormSet', 'FormField', 'FormFieldControl', 'FormFieldControlParameter',
]
