#!/usr/bin/env python3
"""
shadcn-vue MCP server.
Exposes tools, prompts and a quality-standards resource that walk an AI assistant
through generating Vue components with the shadcn-vue component library.
"""

import asyncio
import json
import logging
import sys
import traceback
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from mcp.server import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
import mcp.server.stdio
import mcp.types as types
from pydantic import BaseModel, ValidationError

from vue_ui.config import AppSettings
from vue_ui.docs import build_async_client
from vue_ui.models import (
    AllComponentsDocArgs,
    ComponentBuilderArgs,
    ComponentMetadataArgs,
    ComponentUsageDocArgs,
    CreateUIArgs,
    FilterArgs,
    MessageArgs,
    QualityCheckArgs,
    RefineCodeArgs,
)
from vue_ui.prompts import (
    CHECK_COMPONENT_QUALITY_PROMPT,
    QUALITY_RESOURCE_ALIASES,
    QUALITY_RESOURCE_URI,
    get_component_prompt,
    get_quality_standard,
)
from vue_ui.serializer import deserialize_component_code
from vue_ui.tool_implementations import (
    ToolServices,
    all_components_doc_impl,
    component_builder_impl,
    component_metadata_impl,
    component_quality_check_impl,
    component_usage_doc_impl,
    components_filter_impl,
    create_ui_impl,
    refine_code_impl,
    requirement_structuring_impl,
)

logger = logging.getLogger("shadcn-vue-mcp")


@dataclass(frozen=True)
class ToolSpec:
    description: str
    args_model: Type[BaseModel]
    impl: Callable[[Any, ToolServices], Awaitable[Dict[str, Any]]]
    requires_ai: bool = False


TOOLS: Dict[str, ToolSpec] = {
    "requirement-structuring": ToolSpec(
        description=(
            "Analyze the user's natural language and structure the requirements into a clear "
            "component requirement document."
        ),
        args_model=MessageArgs,
        impl=requirement_structuring_impl,
    ),
    "components-filter": ToolSpec(
        description=(
            "Filter shadcn-vue components and charts needed for a requirement. "
            "Use this tool when the user mentions /filter."
        ),
        args_model=FilterArgs,
        impl=components_filter_impl,
    ),
    "component-usage-doc": ToolSpec(
        description="Read the usage documentation of a component. Use this tool when the user mentions /doc.",
        args_model=ComponentUsageDocArgs,
        impl=component_usage_doc_impl,
    ),
    "all-components-doc": ToolSpec(
        description=(
            "Retrieve documentation for all filtered components and charts to prepare for "
            "component generation."
        ),
        args_model=AllComponentsDocArgs,
        impl=all_components_doc_impl,
    ),
    "component-quality-check": ToolSpec(
        description=(
            "Check the quality of a component whenever a component is generated or updated. "
            "Use this tool when the user mentions /check."
        ),
        args_model=QualityCheckArgs,
        impl=component_quality_check_impl,
    ),
    "component-builder": ToolSpec(
        description=(
            "Use this tool when the user requests a new UI component, e.g. mentions /ui, or asks "
            "for a button, input, dialog, table, form, banner, card, or other Vue component. "
            "It returns the generation pipeline to follow; afterwards edit or add files to "
            "integrate the component into the codebase."
        ),
        args_model=ComponentBuilderArgs,
        impl=component_builder_impl,
    ),
    "component-metadata": ToolSpec(
        description="List the files a shadcn-vue component exports and their local dependencies.",
        args_model=ComponentMetadataArgs,
        impl=component_metadata_impl,
    ),
    "create-ui": ToolSpec(
        description=(
            "Generate a complete Vue component with shadcn-vue and tailwindcss using the "
            "configured AI provider. Use this tool when the user mentions /create-ui."
        ),
        args_model=CreateUIArgs,
        impl=create_ui_impl,
        requires_ai=True,
    ),
    "refine-code": ToolSpec(
        description=(
            "Refine an existing Vue component with shadcn-vue and tailwindcss using the "
            "configured AI provider. Use this tool when the user asks to refine or improve a UI."
        ),
        args_model=RefineCodeArgs,
        impl=refine_code_impl,
        requires_ai=True,
    ),
}


class ShadcnVueMCPServer:
    """
    Component generation MCP server: structures UI requirements, narrows the
    shadcn-vue catalog to what a requirement needs, fetches the matching
    documentation and returns prompts that chain into the next tool.
    """
    SERVER_NAME = "shadcn-vue-mcp"
    SERVER_VERSION = "0.1.0"

    def __init__(self, settings: Optional[AppSettings] = None, services: Optional[ToolServices] = None):
        self.settings = settings or AppSettings()
        self.services = services
        self.server = Server(self.SERVER_NAME)
        self._setup_routes()

    def _setup_routes(self):
        """Configures the routes for the MCP server."""
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)
        self.server.list_prompts()(self.list_prompts)
        self.server.get_prompt()(self.get_prompt)
        self.server.list_resources()(self.list_resources)
        self.server.read_resource()(self.read_resource)

    def _available_tools(self) -> Dict[str, ToolSpec]:
        return {
            name: spec for name, spec in TOOLS.items()
            if self.settings.ai_enabled or not spec.requires_ai
        }

    async def list_tools(self) -> List[types.Tool]:
        """Lists the available tools. AI-backed tools are hidden without credentials."""
        return [
            types.Tool(name=name, description=spec.description, inputSchema=spec.args_model.model_json_schema())
            for name, spec in self._available_tools().items()
        ]

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]]
    ) -> List[types.TextContent]:
        """Validates the arguments, dispatches to the tool implementation and wraps its text output."""
        try:
            spec = self._available_tools().get(name)
            if spec is None:
                return [types.TextContent(type="text", text=f"--- Error ---\nUnknown tool: {name}")]
            if self.services is None:
                raise RuntimeError("Server services are not initialized")

            try:
                params = spec.args_model.model_validate(arguments or {})
            except ValidationError as e:
                logger.info("Rejected arguments for tool '%s': %s", name, e)
                return [types.TextContent(
                    type="text", text=f"--- Error ---\nInvalid arguments for tool '{name}': {e}")]

            logger.debug("Calling tool '%s'", name)
            tool_result_dict = await spec.impl(params, self.services)

            text_to_return = tool_result_dict.get(
                "text_output", f"Error: No text_output from tool '{name}'.")

            if getattr(params, "debug", False) and tool_result_dict.get("debug_log_for_text_output"):
                text_to_return += "\n\n--- Debug Log ---\n" + tool_result_dict["debug_log_for_text_output"]

            return [types.TextContent(type="text", text=text_to_return)]

        except Exception as e:
            logger.exception("Tool '%s' failed", name)
            error_info = {
                "status": "error",
                "error": f"An unexpected error occurred in tool '{name}': {e}",
                "traceback": traceback.format_exc()
            }
            return [types.TextContent(type="text", text=json.dumps(error_info))]

    async def list_prompts(self) -> List[types.Prompt]:
        return [
            types.Prompt(
                name="create-component",
                description="Implementation instructions for a shadcn-vue component meeting the quality standards.",
                arguments=[
                    types.PromptArgument(
                        name="icon",
                        description="Icon library to use: 'lucide' or '@nuxt/icon'.",
                        required=False,
                    )
                ],
            ),
            types.Prompt(
                name="check-component-quality",
                description="Audit a Vue component against the quality checklist.",
                arguments=[
                    types.PromptArgument(name="code", description="Vue component source code.", required=True)
                ],
            ),
        ]

    async def get_prompt(self, name: str, arguments: Optional[Dict[str, str]]) -> types.GetPromptResult:
        arguments = arguments or {}
        if name == "create-component":
            text = get_component_prompt(arguments.get("icon") or self.settings.icon_library)
            description = "Create a shadcn-vue component"
        elif name == "check-component-quality":
            if "code" not in arguments:
                raise ValueError("Missing required argument 'code'")
            code = arguments["code"]
            if "\n" not in code and "\\n" in code:
                # component sent as a single escaped line
                code = deserialize_component_code(code)
            text = f"{CHECK_COMPONENT_QUALITY_PROMPT}\n```vue\n{code}\n```"
            description = "Audit a Vue component"
        else:
            raise ValueError(f"Unknown prompt: {name}")
        return types.GetPromptResult(
            description=description,
            messages=[types.PromptMessage(role="user", content=types.TextContent(type="text", text=text))],
        )

    async def list_resources(self) -> List[types.Resource]:
        return [
            types.Resource(
                uri=QUALITY_RESOURCE_URI,
                name="Component Quality Profile",
                description="Structured quality profile optimized for AI code generation",
                mimeType="application/json",
            )
        ]

    async def read_resource(self, uri: Any) -> List[ReadResourceContents]:
        if str(uri).rstrip("/") not in QUALITY_RESOURCE_ALIASES:
            raise ValueError(f"Unknown resource: {uri}")
        standards = get_quality_standard()
        return [ReadResourceContents(
            content=json.dumps(standards["qualityProfile"], indent=2),
            mime_type="application/json",
        )]

    def _get_initialization_options(self) -> InitializationOptions:
        """Returns the initialization options for the server."""
        return InitializationOptions(
            server_name=self.SERVER_NAME,
            server_version=self.SERVER_VERSION,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )

    async def run(self):
        """Starts the server and listens for requests on stdio."""
        async with build_async_client(self.settings) as client:
            if self.services is None:
                self.services = ToolServices.create(self.settings, client)
            logger.info(
                "Starting %s %s (AI tools %s)", self.SERVER_NAME, self.SERVER_VERSION,
                "enabled" if self.settings.ai_enabled else "disabled")
            async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self._get_initialization_options(),
                )


def main():
    settings = AppSettings()
    # stdout carries the MCP stream; logs go to stderr
    logging.basicConfig(
        level=settings.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    server = ShadcnVueMCPServer(settings)
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
