from __future__ import annotations

import pytest

from kickstart_alfresco.config import ConversionSettings
from kickstart_alfresco.schemas.process_flow import (
    WorkflowDefinition, Process, StartEvent, UserTask, EndEvent, SequenceFlow
)
from kickstart_alfresco.services.conversion import WorkflowDefinitionConversion


@pytest.fixture
def settings():
    return ConversionSettings(log_level="DEBUG", model_author="kickstart", model_version="1.0")


def build_process(process_id, start_events):
    process = Process(id=process_id, name="Review")
    for start_event in start_events:
        process.add_flow_element(start_event)
    process.add_flow_element(UserTask(id="review", name="Review document", assignee="${initiator}"))
    process.add_flow_element(EndEvent(id="end"))
    process.add_flow_element(SequenceFlow(id="flow1", source_ref=start_events[0].id, target_ref="review"))
    process.add_flow_element(SequenceFlow(id="flow2", source_ref="review", target_ref="end"))
    return process


@pytest.fixture
def conversion():
    definition = WorkflowDefinition(id="review_process", name="Review")
    conv = WorkflowDefinitionConversion(definition)
    conv.process = build_process("review_process", [StartEvent(id="start")])
    return conv


@pytest.fixture
def make_process():
    return build_process
