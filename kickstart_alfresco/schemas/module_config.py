# schemas/module_config.py
"""
Share module configuration models.

Mirrors the structure of an Alfresco Share extension module: a module holds
conditional configuration blocks, each of which may carry a form with field
visibility and appearance (sets, fields and their controls). Aliases follow
the attribute names used by the downstream XML serializer.
"""
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class _ConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ---------- Controls ----------

class FormFieldControlParameter(_ConfigModel):
    name: str
    value: str


class FormFieldControl(_ConfigModel):
    template: Optional[str] = None
    control_parameters: List[FormFieldControlParameter] = Field(default_factory=list, alias="control-param")

    def add_control_parameter(self, name: str, value: str) -> FormFieldControlParameter:
        parameter = FormFieldControlParameter(name=name, value=value)
        self.control_parameters.append(parameter)
        return parameter


# ---------- Appearance ----------

class FormSet(_ConfigModel):
    id: str
    appearance: Optional[str] = None
    label_id: Optional[str] = Field(default=None, alias="label-id")
    template: Optional[str] = None
    parent: Optional[str] = None


class FormField(_ConfigModel):
    id: Optional[str] = None
    label_id: Optional[str] = Field(default=None, alias="label-id")
    set: Optional[str] = None
    read_only: Optional[bool] = Field(default=None, alias="read-only")
    mandatory: Optional[bool] = None
    help: Optional[str] = None
    control: Optional[FormFieldControl] = None


class FormFieldVisibility(_ConfigModel):
    show_field_elements: List[str] = Field(default_factory=list, alias="show")
    hide_field_elements: List[str] = Field(default_factory=list, alias="hide")

    def add_show_field_element(self, field_id: str) -> None:
        if field_id not in self.show_field_elements:
            self.show_field_elements.append(field_id)


class FormAppearance(_ConfigModel):
    form_sets: List[FormSet] = Field(default_factory=list, alias="set")
    form_fields: List[FormField] = Field(default_factory=list, alias="field")

    def add_form_set(self, set_id: str, appearance: Optional[str] = None,
                     label_id: Optional[str] = None, template: Optional[str] = None) -> FormSet:
        form_set = FormSet(id=set_id, appearance=appearance, label_id=label_id, template=template)
        self.form_sets.append(form_set)
        return form_set

    def add_form_field(self, field_id: str, label_id: Optional[str] = None,
                       set_id: Optional[str] = None) -> FormField:
        field = FormField(id=field_id, label_id=label_id, set=set_id)
        self.form_fields.append(field)
        return field

    def add_form_appearance_element(self, field: FormField) -> FormField:
        self.form_fields.append(field)
        return field


class Form(_ConfigModel):
    id: Optional[str] = None
    form_field_visibility: FormFieldVisibility = Field(default_factory=FormFieldVisibility, alias="field-visibility")
    form_appearance: FormAppearance = Field(default_factory=FormAppearance, alias="appearance")


# ---------- Module ----------

class Configuration(_ConfigModel):
    evaluator: Optional[str] = None
    condition: Optional[str] = None
    forms: List[Form] = Field(default_factory=list)

    def create_form(self, form_id: Optional[str] = None) -> Form:
        form = Form(id=form_id)
        self.forms.append(form)
        return form


class Module(_ConfigModel):
    id: Optional[str] = None
    configurations: List[Configuration] = Field(default_factory=list)

    def add_configuration(self, evaluator: str, condition: str) -> Configuration:
        configuration = Configuration(evaluator=evaluator, condition=condition)
        self.configurations.append(configuration)
        return configuration
