"""
Form Module Builder

Creates the Share module that collects the form configuration of a process.
"""

import logging

from kickstart_alfresco.constants import MODULE_ID
from kickstart_alfresco.schemas.module_config import Module
from kickstart_alfresco.services.conversion import WorkflowDefinitionConversion
from kickstart_alfresco.utils.conversion_util import store_module

logger = logging.getLogger(__name__)


def add_module(conversion: WorkflowDefinitionConversion, process_id: str) -> Module:
    module = Module(id=MODULE_ID.format(process_id))
    store_module(module, conversion)
    logger.info(f"Created share module '{module.id}'")
    return module
