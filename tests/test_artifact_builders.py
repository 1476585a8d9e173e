import pytest

from kickstart_alfresco.services.conversion import ConversionArtifactMissingError
from kickstart_alfresco.translators.content_model_builder import add_content_model
from kickstart_alfresco.translators.form_module_builder import add_module
from kickstart_alfresco.utils.conversion_util import (
    get_content_model, get_model_namespace_prefix, get_module, get_qualified_name
)


def test_content_model_is_namespaced_by_process_id(conversion):
    model, namespace = add_content_model(conversion, "review_process")

    assert model.name == "review_process:model"
    assert namespace.prefix == "review_process"
    assert namespace.uri == "http://www.alfresco.org/model/review_process/1.0"
    assert model.namespaces == [namespace]


@pytest.mark.parametrize("process_id", ["review_process", "process1b2c", "_"])
def test_content_model_imports_are_fixed(conversion, process_id):
    model, _ = add_content_model(conversion, process_id)

    assert [(ns.prefix, ns.uri) for ns in model.imports] == [
        ("d", "http://www.alfresco.org/model/dictionary/1.0"),
        ("cm", "http://www.alfresco.org/model/content/1.0"),
        ("bpm", "http://www.alfresco.org/model/bpm/1.0"),
    ]


def test_content_model_is_stored_with_matching_prefix(conversion):
    model, namespace = add_content_model(conversion, "review_process", author="me", version="2.0")

    assert get_content_model(conversion) is model
    assert get_model_namespace_prefix(conversion) == namespace.prefix
    assert model.author == "me"
    assert model.version == "2.0"


def test_same_process_id_gives_same_namespace(conversion):
    _, first = add_content_model(conversion, "review_process")
    _, second = add_content_model(conversion, "review_process")

    assert first == second
    assert first is not second


def test_module_id_is_templated_from_process_id(conversion):
    module = add_module(conversion, "review_process")

    assert module.id == "kickstart_form_review_process"
    assert module.configurations == []
    assert get_module(conversion) is module


def test_missing_artifacts_raise(conversion):
    for getter in (get_content_model, get_model_namespace_prefix, get_module):
        with pytest.raises(ConversionArtifactMissingError):
            getter(conversion)


def test_qualified_name():
    assert get_qualified_name("bpm", "startTask") == "bpm:startTask"
