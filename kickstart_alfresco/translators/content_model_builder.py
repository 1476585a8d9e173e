"""
Content Model Builder

Creates the Alfresco content model that holds the custom types of a
converted process. The process id doubles as namespace prefix, which keeps
the model unique per process.
"""

from typing import Optional, Tuple
import logging

from kickstart_alfresco.constants import (
    CONTENT_MODEL_UNQUALIFIED_NAME,
    DICTIONARY_NAMESPACE_URI, DICTIONARY_NAMESPACE_PREFIX,
    CONTENT_NAMESPACE_URI, CONTENT_NAMESPACE_PREFIX,
    BPM_NAMESPACE_URI, BPM_NAMESPACE_PREFIX
)
from kickstart_alfresco.schemas.content_model import M2Model, M2Namespace
from kickstart_alfresco.services.conversion import WorkflowDefinitionConversion
from kickstart_alfresco.utils.conversion_util import (
    get_qualified_name, create_namespace,
    store_content_model, store_model_namespace_prefix
)

logger = logging.getLogger(__name__)


def required_imports():
    """Alfresco models every generated content model imports, in declaration order."""
    return [
        M2Namespace(uri=DICTIONARY_NAMESPACE_URI, prefix=DICTIONARY_NAMESPACE_PREFIX),
        M2Namespace(uri=CONTENT_NAMESPACE_URI, prefix=CONTENT_NAMESPACE_PREFIX),
        M2Namespace(uri=BPM_NAMESPACE_URI, prefix=BPM_NAMESPACE_PREFIX),
    ]


def add_content_model(conversion: WorkflowDefinitionConversion, process_id: str,
                      author: Optional[str] = None,
                      version: Optional[str] = None) -> Tuple[M2Model, M2Namespace]:
    """
    Build the content model for a process and store it in the conversion.

    Args:
        conversion: The running conversion
        process_id: Valid process id, used as namespace prefix
        author: Optional author stamped on the model
        version: Optional model version

    Returns:
        Tuple of the model and its namespace
    """
    model = M2Model(
        name=get_qualified_name(process_id, CONTENT_MODEL_UNQUALIFIED_NAME),
        description=conversion.workflow_definition.description,
        author=author,
        version=version
    )

    namespace = create_namespace(process_id)
    model.namespaces.append(namespace)
    model.imports.extend(required_imports())

    store_content_model(model, conversion)
    store_model_namespace_prefix(namespace.prefix, conversion)

    logger.info(f"Created content model '{model.name}' in namespace {namespace.uri}")
    return model, namespace
