"""
Argument models for the MCP tools. Each model doubles as the tool's input schema.
"""

from typing import Any, List, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from vue_ui.catalog import is_valid_component

Necessity = Literal["critical", "important", "optional"]
ComponentKind = Literal["components", "charts"]


class ComponentSelection(BaseModel):
    name: str
    necessity: Necessity
    justification: str


class FilteredComponents(BaseModel):
    components: List[ComponentSelection] = Field(default_factory=list)
    charts: List[ComponentSelection] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_singular_key(cls, data: Any) -> Any:
        # LLM replies sometimes use "component" instead of "components"
        if isinstance(data, dict) and "component" in data and "components" not in data:
            data = dict(data)
            data["components"] = data.pop("component")
        return data


class MessageArgs(BaseModel):
    message: str = Field(description="Content about the user requirement in its specific context")


class FilterArgs(BaseModel):
    message: str = Field(description="Requirement JSON from the requirement-structuring tool")


class ComponentBuilderArgs(BaseModel):
    message: str = Field(description="Description of the Web UI")


class ComponentUsageDocArgs(BaseModel):
    type: ComponentKind = Field(description="Type of the component from the components-filter tool")
    name: str = Field(description="Name of the component from the components-filter tool")
    debug: bool = Field(default=False, description="Include the debug log in the output.")

    @model_validator(mode="after")
    def _check_catalog(self) -> "ComponentUsageDocArgs":
        if not is_valid_component(self.name, self.type):
            raise ValueError(f"'{self.name}' is not a valid shadcn-vue {self.type[:-1]}")
        return self


class AllComponentsDocArgs(BaseModel):
    components: List[ComponentSelection] = Field(description="Components from the components-filter tool")
    charts: List[ComponentSelection] = Field(
        default_factory=list, description="Charts from the components-filter tool"
    )
    min_necessity: Necessity = Field(
        default="optional", description="Skip selections less necessary than this level."
    )
    debug: bool = Field(default=False, description="Include the debug log in the output.")


class QualityCheckArgs(BaseModel):
    absolute_component_path: str = Field(description="Absolute path of the component")


class ComponentMetadataArgs(BaseModel):
    name: str = Field(description="Name of a shadcn-vue component")
    debug: bool = Field(default=False, description="Include the debug log in the output.")

    @field_validator("name")
    @classmethod
    def _check_catalog(cls, value: str) -> str:
        if not is_valid_component(value, "components"):
            raise ValueError(f"'{value}' is not a valid shadcn-vue component")
        return value


class CreateUIArgs(BaseModel):
    description: str = Field(description="Description of the Web UI")


class RefineCodeArgs(BaseModel):
    user_message: str = Field(description="Full user's message about UI refinement")
    absolute_path_to_refining_file: str = Field(
        description="Absolute path to the file that needs to be refined"
    )
    context: str = Field(
        default="",
        description=(
            "The specific UI elements and aspects the user wants improved, inferred from the "
            "conversation. Empty when nothing specific was requested."
        ),
    )
