from kickstart_alfresco.schemas.process_flow import WorkflowDefinition, Process
from kickstart_alfresco.services.conversion import WorkflowDefinitionConversion
from kickstart_alfresco.services.process_id import (
    get_valid_id_string, is_valid_id, assign_process_id, generate_unique_process_id
)


def _conversion(definition_id):
    conv = WorkflowDefinitionConversion(WorkflowDefinition(id=definition_id))
    conv.process = Process(id=definition_id)
    return conv


def test_valid_id_is_returned_unchanged():
    assert get_valid_id_string("review_process") == "review_process"
    assert get_valid_id_string("_x1") == "_x1"


def test_illegal_characters_are_replaced():
    assert get_valid_id_string("Review Process-2") == "review_process_2"
    assert get_valid_id_string("a:b/c.d") == "a_b_c_d"


def test_sanitizer_is_total():
    assert get_valid_id_string("") == "_"
    assert get_valid_id_string("123") == "_123"
    for raw in ["", "123", "Ünïcode name", "    ", "$$$", "x"]:
        assert is_valid_id(get_valid_id_string(raw))


def test_is_valid_id():
    assert is_valid_id("process_1")
    assert not is_valid_id("")
    assert not is_valid_id("Process")
    assert not is_valid_id("1process")
    assert not is_valid_id("a-b")


def test_preset_valid_id_is_kept_without_mutation():
    conv = _conversion("my_process")

    assert assign_process_id(conv) == "my_process"
    assert conv.workflow_definition.id == "my_process"
    assert conv.process.id == "my_process"


def test_preset_invalid_id_is_sanitized_but_not_written_back():
    conv = _conversion("My Process")

    assert assign_process_id(conv) == "my_process"
    assert conv.workflow_definition.id == "My Process"


def test_missing_id_is_generated_and_assigned():
    conv = _conversion(None)

    process_id = assign_process_id(conv)

    assert process_id.startswith("process")
    assert is_valid_id(process_id)
    assert conv.process.id == process_id
    assert conv.workflow_definition.id == process_id


def test_generated_ids_are_unique():
    first = generate_unique_process_id(_conversion(None))
    second = generate_unique_process_id(_conversion(None))

    assert first != second
    assert is_valid_id(first)
    assert is_valid_id(second)
