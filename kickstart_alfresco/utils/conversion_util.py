"""
Conversion artifact helpers

Naming helpers and typed accessors for the Alfresco artifacts kept in a
conversion's artifact registry.
"""

from kickstart_alfresco.constants import (
    ARTIFACT_CONTENT_MODEL, ARTIFACT_MODEL_NAMESPACE_PREFIX, ARTIFACT_MODULE,
    CONTENT_MODEL_NAMESPACE_URL
)
from kickstart_alfresco.schemas.content_model import M2Model, M2Namespace
from kickstart_alfresco.schemas.module_config import Module
from kickstart_alfresco.services.conversion import (
    WorkflowDefinitionConversion, ConversionArtifactMissingError
)


def get_qualified_name(prefix: str, name: str) -> str:
    return f"{prefix}:{name}"


def create_namespace(process_id: str) -> M2Namespace:
    """Namespace for a process: the process id is both the prefix and part of the URI."""
    return M2Namespace(uri=CONTENT_MODEL_NAMESPACE_URL.format(process_id), prefix=process_id)


def store_content_model(model: M2Model, conversion: WorkflowDefinitionConversion) -> None:
    conversion.set_artifact(ARTIFACT_CONTENT_MODEL, model)


def store_model_namespace_prefix(prefix: str, conversion: WorkflowDefinitionConversion) -> None:
    conversion.set_artifact(ARTIFACT_MODEL_NAMESPACE_PREFIX, prefix)


def store_module(module: Module, conversion: WorkflowDefinitionConversion) -> None:
    conversion.set_artifact(ARTIFACT_MODULE, module)


def _require_artifact(conversion: WorkflowDefinitionConversion, key: str):
    artifact = conversion.get_artifact(key)
    if artifact is None:
        raise ConversionArtifactMissingError(f"No '{key}' artifact found in conversion")
    return artifact


def get_content_model(conversion: WorkflowDefinitionConversion) -> M2Model:
    return _require_artifact(conversion, ARTIFACT_CONTENT_MODEL)


def get_model_namespace_prefix(conversion: WorkflowDefinitionConversion) -> str:
    return _require_artifact(conversion, ARTIFACT_MODEL_NAMESPACE_PREFIX)


def get_module(conversion: WorkflowDefinitionConversion) -> Module:
    return _require_artifact(conversion, ARTIFACT_MODULE)
