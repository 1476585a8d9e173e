# schemas/process_flow.py
from __future__ import annotations
from typing import Annotated, List, Optional, Dict, Any, Union, Literal
from enum import Enum
from pydantic import BaseModel, Field

# ---------- Core Enums ----------

class FlowElementType(str, Enum):
    START_EVENT = "start_event"
    END_EVENT = "end_event"
    USER_TASK = "user_task"
    SCRIPT_TASK = "script_task"
    SEQUENCE_FLOW = "sequence_flow"
    PARALLEL_GATEWAY = "parallel_gateway"
    EXCLUSIVE_GATEWAY = "exclusive_gateway"

# ---------- Workflow Definition ----------

class WorkflowDefinition(BaseModel):
    """Abstract workflow definition as handed over by the definition parser."""
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    steps: List[Dict[str, Any]] = Field(default_factory=list)

# ---------- Graph Models ----------

class StartEvent(BaseModel):
    """
    Start point of a process.

    The form key is the only attribute conversion listeners are allowed to
    change, and only through assign_form_key().
    """
    type: Literal[FlowElementType.START_EVENT] = FlowElementType.START_EVENT
    id: str
    name: Optional[str] = None
    form_key: Optional[str] = None
    initiator: Optional[str] = None

    def assign_form_key(self, form_key: str) -> None:
        self.form_key = form_key

class EndEvent(BaseModel):
    type: Literal[FlowElementType.END_EVENT] = FlowElementType.END_EVENT
    id: str
    name: Optional[str] = None

class UserTask(BaseModel):
    type: Literal[FlowElementType.USER_TASK] = FlowElementType.USER_TASK
    id: str
    name: Optional[str] = None
    form_key: Optional[str] = None
    assignee: Optional[str] = None

class ScriptTask(BaseModel):
    type: Literal[FlowElementType.SCRIPT_TASK] = FlowElementType.SCRIPT_TASK
    id: str
    name: Optional[str] = None
    script_format: str = "javascript"
    script: Optional[str] = None

class SequenceFlow(BaseModel):
    type: Literal[FlowElementType.SEQUENCE_FLOW] = FlowElementType.SEQUENCE_FLOW
    id: str
    source_ref: str
    target_ref: str
    condition: Optional[str] = None

class ParallelGateway(BaseModel):
    type: Literal[FlowElementType.PARALLEL_GATEWAY] = FlowElementType.PARALLEL_GATEWAY
    id: str
    name: Optional[str] = None

class ExclusiveGateway(BaseModel):
    type: Literal[FlowElementType.EXCLUSIVE_GATEWAY] = FlowElementType.EXCLUSIVE_GATEWAY
    id: str
    name: Optional[str] = None

FlowElement = Annotated[
    Union[StartEvent, EndEvent, UserTask, ScriptTask, SequenceFlow, ParallelGateway, ExclusiveGateway],
    Field(discriminator="type"),
]

class Process(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    flow_elements: List[FlowElement] = Field(default_factory=list)

    def add_flow_element(self, element: FlowElement) -> FlowElement:
        self.flow_elements.append(element)
        return element

    def start_events(self) -> List[StartEvent]:
        return [e for e in self.flow_elements if isinstance(e, StartEvent)]

# ---------- Validation Helpers ----------

def validate_process_graph(process: Process) -> List[str]:
    """
    Validate structural constraints for a process graph:
    - element ids are unique
    - sequence flows reference existing elements
    - at least one start event exists
    """
    errs: List[str] = []
    seen: Dict[str, int] = {}

    for element in process.flow_elements:
        seen[element.id] = seen.get(element.id, 0) + 1

    for element_id, count in seen.items():
        if count > 1:
            errs.append(f"Flow element id '{element_id}' used {count} times")

    for element in process.flow_elements:
        if isinstance(element, SequenceFlow):
            if element.source_ref not in seen:
                errs.append(f"Sequence flow '{element.id}' source '{element.source_ref}' not found")
            if element.target_ref not in seen:
                errs.append(f"Sequence flow '{element.id}' target '{element.target_ref}' not found")

    if not process.start_events():
        errs.append("Process has no start event")

    return errs
