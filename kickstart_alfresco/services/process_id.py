"""
Process ID Service

Turns user-supplied process ids into ids that are safe to use as Alfresco
namespace prefixes and module ids, and generates fresh ids for definitions
that have none.
"""

import logging
import re
import uuid

from kickstart_alfresco.constants import PROCESS_ID_PREFIX
from kickstart_alfresco.services.conversion import WorkflowDefinitionConversion

logger = logging.getLogger(__name__)

_VALID_ID = re.compile(r"^[a-z_][a-z0-9_]*$")
_ILLEGAL_CHARS = re.compile(r"[^a-z0-9_]")


def get_valid_id_string(raw: str) -> str:
    """
    Sanitize any string into a valid id.

    Lowercases the input and replaces every character outside [a-z0-9_]
    with an underscore. Ids may not start with a digit, so those get a
    leading underscore. Ids that are already valid come back unchanged.

    Args:
        raw: The string to sanitize

    Returns:
        str: An id matching ^[a-z_][a-z0-9_]*$
    """
    valid_id = _ILLEGAL_CHARS.sub("_", raw.lower())
    if not valid_id:
        return "_"
    if valid_id[0].isdigit():
        valid_id = "_" + valid_id
    return valid_id


def is_valid_id(value: str) -> bool:
    if not value:
        return False
    return _VALID_ID.match(value) is not None


def generate_unique_process_id(conversion: WorkflowDefinitionConversion) -> str:
    """
    Generate a new process id and assign it to the process being built.

    The id is also written back onto the workflow definition so later
    phases see the same value.
    """
    process_id = get_valid_id_string(PROCESS_ID_PREFIX + str(uuid.uuid4()))
    conversion.process.id = process_id
    conversion.workflow_definition.id = process_id
    logger.info(f"Generated process id '{process_id}'")
    return process_id


def assign_process_id(conversion: WorkflowDefinitionConversion) -> str:
    """
    Return the process id to use for the conversion's artifacts.

    Args:
        conversion: The running conversion

    Returns:
        str: The sanitized definition id, or a freshly generated one
    """
    definition_id = conversion.workflow_definition.id
    if definition_id is not None:
        process_id = get_valid_id_string(definition_id)
        if process_id != definition_id:
            logger.debug(f"Sanitized process id '{definition_id}' to '{process_id}'")
        return process_id
    return generate_unique_process_id(conversion)
