"""
Default Start Form

Gives start events without a form the default Alfresco start task form, and
adds the matching workflow-details form configuration to the Share module.
"""

from typing import List
import logging

from kickstart_alfresco.constants import (
    DEFAULT_START_FORM_TYPE, EVALUATOR_STRING_COMPARE, EVALUATOR_CONDITION_ACTIVITI,
    PROPERTY_WORKFLOW_DESCRIPTION, PROPERTY_WORKFLOW_DUE_DATE, PROPERTY_WORKFLOW_PRIORITY,
    PROPERTY_PACKAGEITEMS, PROPERTY_SEND_EMAIL_NOTIFICATIONS,
    FORM_SET_GENERAL, FORM_SET_INFO, FORM_SET_ASSIGNEE, FORM_SET_ITEMS, FORM_SET_OTHER,
    FORM_SET_APPEARANCE_TITLE, FORM_SET_TEMPLATE_2_COLUMN,
    FORM_SET_GENERAL_LABEL, FORM_SET_ASSIGNEE_LABEL, FORM_SET_ITEMS_LABEL, FORM_SET_OTHER_LABEL,
    FORM_WORKFLOW_DESCRIPTION_LABEL, FORM_WORKFLOW_DUE_DATE_LABEL, FORM_WORKFLOW_PRIORITY_LABEL,
    FORM_MULTILINE_TEXT_TEMPLATE, FORM_DATE_TEMPLATE, FORM_PRIORITY_TEMPLATE,
    FORM_EMAIL_NOTIFICATION_TEMPLATE, FORM_DATE_PARAM_SHOW_TIME, FORM_DATE_PARAM_SUBMIT_TIME
)
from kickstart_alfresco.schemas.module_config import (
    Configuration, Form, FormField, FormFieldControl
)
from kickstart_alfresco.schemas.process_flow import StartEvent
from kickstart_alfresco.services.conversion import (
    WorkflowDefinitionConversion, AlfrescoConversionError
)
from kickstart_alfresco.utils.conversion_util import get_module

logger = logging.getLogger(__name__)


def enrich_start_events(conversion: WorkflowDefinitionConversion) -> List[StartEvent]:
    """
    Assign the default start form to every start event without a form key.

    Each enriched start event adds its own details-form configuration to the
    module, even when several of them share the same process.

    Returns:
        List[StartEvent]: the start events that received a form key
    """
    process = conversion.process
    if process is None:
        raise AlfrescoConversionError("Conversion has no process to enrich")

    enriched: List[StartEvent] = []
    for flow_element in process.flow_elements:
        if not isinstance(flow_element, StartEvent):
            continue
        if flow_element.form_key is not None:
            logger.debug(f"Start event '{flow_element.id}' keeps form key '{flow_element.form_key}'")
            continue

        module = get_module(conversion)
        flow_element.assign_form_key(DEFAULT_START_FORM_TYPE)

        # Workflow-details screen for the default start form
        details_form = module.add_configuration(
            EVALUATOR_STRING_COMPARE,
            EVALUATOR_CONDITION_ACTIVITI.format(process.id)
        )
        populate_default_detail_form(details_form)

        logger.info(f"Start event '{flow_element.id}' uses default start form {DEFAULT_START_FORM_TYPE}")
        enriched.append(flow_element)

    return enriched


def populate_default_detail_form(configuration: Configuration) -> Form:
    """Add the default workflow-details form to a configuration."""
    form = configuration.create_form()

    visibility = form.form_field_visibility
    visibility.add_show_field_element(PROPERTY_WORKFLOW_DESCRIPTION)
    visibility.add_show_field_element(PROPERTY_WORKFLOW_DUE_DATE)
    visibility.add_show_field_element(PROPERTY_WORKFLOW_PRIORITY)
    visibility.add_show_field_element(PROPERTY_PACKAGEITEMS)
    visibility.add_show_field_element(PROPERTY_SEND_EMAIL_NOTIFICATIONS)

    appearance = form.form_appearance
    appearance.add_form_set(FORM_SET_GENERAL, FORM_SET_APPEARANCE_TITLE, FORM_SET_GENERAL_LABEL, None)
    appearance.add_form_set(FORM_SET_INFO, None, None, FORM_SET_TEMPLATE_2_COLUMN)
    appearance.add_form_set(FORM_SET_ASSIGNEE, FORM_SET_APPEARANCE_TITLE, FORM_SET_ASSIGNEE_LABEL, None)
    appearance.add_form_set(FORM_SET_ITEMS, FORM_SET_APPEARANCE_TITLE, FORM_SET_ITEMS_LABEL, None)
    appearance.add_form_set(FORM_SET_OTHER, FORM_SET_APPEARANCE_TITLE, FORM_SET_OTHER_LABEL, None)

    appearance.add_form_appearance_element(FormField(
        id=PROPERTY_WORKFLOW_DESCRIPTION,
        label_id=FORM_WORKFLOW_DESCRIPTION_LABEL,
        control=FormFieldControl(template=FORM_MULTILINE_TEXT_TEMPLATE)
    ))

    due_date_control = FormFieldControl(template=FORM_DATE_TEMPLATE)
    due_date_control.add_control_parameter(FORM_DATE_PARAM_SHOW_TIME, "false")
    due_date_control.add_control_parameter(FORM_DATE_PARAM_SUBMIT_TIME, "false")
    appearance.add_form_appearance_element(FormField(
        id=PROPERTY_WORKFLOW_DUE_DATE,
        label_id=FORM_WORKFLOW_DUE_DATE_LABEL,
        set=FORM_SET_INFO,
        control=due_date_control
    ))

    appearance.add_form_appearance_element(FormField(
        id=PROPERTY_WORKFLOW_PRIORITY,
        label_id=FORM_WORKFLOW_PRIORITY_LABEL,
        set=FORM_SET_INFO,
        control=FormFieldControl(template=FORM_PRIORITY_TEMPLATE)
    ))

    appearance.add_form_field(PROPERTY_PACKAGEITEMS, None, FORM_SET_ITEMS)

    appearance.add_form_appearance_element(FormField(
        id=PROPERTY_SEND_EMAIL_NOTIFICATIONS,
        set=FORM_SET_OTHER,
        control=FormFieldControl(template=FORM_EMAIL_NOTIFICATION_TEMPLATE)
    ))

    return form
