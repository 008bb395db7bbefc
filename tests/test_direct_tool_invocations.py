import json

import pytest
from pydantic import AnyUrl

from server import TOOLS, ShadcnVueMCPServer
from vue_ui.config import AppSettings
from vue_ui.docs import CDN_BASE_URL, CONTEXT7_API_BASE_URL, NO_DOCUMENTATION
from vue_ui.metadata import REGISTRY_BASE_URL
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
from vue_ui.prompts import QUALITY_RESOURCE_URI
from vue_ui.tool_implementations import (
    ERROR,
    PARTIAL,
    SUCCESS,
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

CONTEXT7_URL = f"{CONTEXT7_API_BASE_URL}/v1/unovue/shadcn-vue"
BUTTON_DOC_URL = f"{CDN_BASE_URL}/src/content/docs/components/button.md"
BUTTON_DOC = """## Usage

```vue
<script setup lang="ts">
import { Button } from '@/components/ui/button'
</script>
```

## Examples

<ComponentPreview name="ButtonDemo" />
"""
GOOD_SFC = """<template>
  <Button>Save</Button>
</template>

<script setup lang="ts">
import { Button } from '@/components/ui/button'
</script>
"""


def _selection(name, necessity="critical", justification="needed"):
    return {"name": name, "necessity": necessity, "justification": justification}


# --- Prompt tools ---


@pytest.mark.asyncio
async def test_requirement_structuring_embeds_message(make_services):
    services, _ = make_services({})
    result = await requirement_structuring_impl(MessageArgs(message="a pricing table"), services)

    assert result["status"] == SUCCESS
    assert 'USER REQUIREMENT: "a pricing table"' in result["text_output"]
    assert result["text_output"].endswith("call the components-filter tool.")


@pytest.mark.asyncio
async def test_components_filter_wraps_message_and_lists_catalog(make_services):
    services, _ = make_services({})
    result = await components_filter_impl(FilterArgs(message='{"title": "Login"}'), services)

    text = result["text_output"]
    assert '<user-message>{"title": "Login"}</user-message>' in text
    assert "AVAILABLE COMPONENTS:" in text and "AVAILABLE CHARTS:" in text
    assert text.endswith("call the all-components-doc tool")


@pytest.mark.asyncio
async def test_component_builder_lists_pipeline(make_services):
    services, _ = make_services({})
    result = await component_builder_impl(ComponentBuilderArgs(message="a login form"), services)

    text = result["text_output"]
    assert "1. requirement-structuring, user requirement: a login form" in text
    assert text.index("2. components-filter") < text.index("3. all-components-doc")
    assert QUALITY_RESOURCE_URI in text


# --- Documentation tools ---


@pytest.mark.asyncio
async def test_component_usage_doc_expands_demo(make_services):
    routes = {
        BUTTON_DOC_URL: (200, BUTTON_DOC),
        f"{CDN_BASE_URL}/src/registry/default/examples/ButtonDemo.vue": (200, "<template><Button /></template>"),
    }
    services, _ = make_services(routes)

    result = await component_usage_doc_impl(
        ComponentUsageDocArgs(type="components", name="button", debug=True), services)

    assert result["status"] == SUCCESS
    assert "```vue\n<template><Button /></template>\n```" in result["text_output"]
    assert "Fetched components/button" in result["debug_log_for_text_output"]


@pytest.mark.asyncio
async def test_component_usage_doc_missing_doc_is_partial(make_services):
    services, _ = make_services({})
    result = await component_usage_doc_impl(ComponentUsageDocArgs(type="charts", name="bar"), services)

    assert result["status"] == PARTIAL
    assert result["text_output"] == NO_DOCUMENTATION
    assert "debug_log_for_text_output" not in result


def test_component_usage_doc_args_reject_unknown_names():
    with pytest.raises(ValueError, match="not a valid shadcn-vue chart"):
        ComponentUsageDocArgs(type="charts", name="button")


@pytest.mark.asyncio
async def test_all_components_doc_builds_markdown_and_prompt(make_services):
    services, transport = make_services({CONTEXT7_URL: (200, "Docs for the topic")})
    params = AllComponentsDocArgs(
        components=[_selection("button"), _selection("badge", "optional")],
        charts=[_selection("bar", "important")],
        min_necessity="important",
        debug=True,
    )

    result = await all_components_doc_impl(params, services)

    text = result["text_output"]
    assert result["status"] == SUCCESS
    assert text.startswith("# Filtered Components Documentation")
    assert "### button (critical)\n\n> needed\n\nDocs for the topic" in text
    assert "### bar (important)" in text
    assert "badge" not in text.split("<role>")[0]
    assert "lucide-vue-next" in text
    assert sorted(r.url.params["topic"] for r in transport.requests) == ["bar", "button"]
    assert all(r.url.params["tokens"] == "700" for r in transport.requests)
    assert "Skipped 1 selection(s) below necessity 'important'" in result["debug_log_for_text_output"]
    assert "Missing documentation: 0" in result["debug_log_for_text_output"]


@pytest.mark.asyncio
async def test_all_components_doc_partial_when_docs_missing(make_services):
    services, _ = make_services({CONTEXT7_URL: (200, "No content available")})
    result = await all_components_doc_impl(AllComponentsDocArgs(components=[_selection("dialog")]), services)

    assert result["status"] == PARTIAL
    assert f"### dialog (critical)\n\n> needed\n\n{NO_DOCUMENTATION}" in result["text_output"]


# --- File based tools ---


@pytest.mark.asyncio
async def test_quality_check_returns_checklist_and_code(make_services, tmp_path):
    component = tmp_path / "SaveButton.vue"
    component.write_text(GOOD_SFC, encoding="utf-8")
    services, _ = make_services({})

    result = await component_quality_check_impl(QualityCheckArgs(absolute_component_path=str(component)), services)

    text = result["text_output"]
    assert result["status"] == SUCCESS
    assert "Component-Auditor" in text
    assert "[Warning:" not in text
    assert text.endswith(f"```vue\n{GOOD_SFC}```")


@pytest.mark.asyncio
async def test_quality_check_warns_on_incomplete_component(make_services, tmp_path):
    component = tmp_path / "Partial.vue"
    component.write_text("<template><div /></template>\n", encoding="utf-8")
    services, _ = make_services({})

    result = await component_quality_check_impl(QualityCheckArgs(absolute_component_path=str(component)), services)

    assert "does not contain both a <template> and a <script> block" in result["text_output"]


@pytest.mark.asyncio
async def test_quality_check_rejects_bad_paths(make_services, tmp_path):
    services, _ = make_services({})

    relative = await component_quality_check_impl(QualityCheckArgs(absolute_component_path="src/App.vue"), services)
    missing = await component_quality_check_impl(
        QualityCheckArgs(absolute_component_path=str(tmp_path / "Nope.vue")), services)
    directory = await component_quality_check_impl(QualityCheckArgs(absolute_component_path=str(tmp_path)), services)

    assert relative["status"] == ERROR
    assert relative["text_output"].startswith("--- Error ---\n")
    assert "must be an absolute path" in relative["text_output"]
    assert "not found or not a file" in missing["text_output"]
    assert "not found or not a file" in directory["text_output"]


# --- Metadata tool ---


@pytest.mark.asyncio
async def test_component_metadata_lists_exports_and_dependencies(make_services):
    routes = {
        f"{REGISTRY_BASE_URL}button/index.ts": (200, "export { default as Button } from './Button.vue'\n"),
        f"{REGISTRY_BASE_URL}button/Button.vue": (200, "<script setup>\nimport { cn } from '@/lib/utils'\n</script>"),
    }
    services, _ = make_services(routes)

    result = await component_metadata_impl(ComponentMetadataArgs(name="button", debug=True), services)

    text = result["text_output"]
    assert result["status"] == SUCCESS
    assert text.startswith("COMPONENT: button\nEXPORTS:\n- Button (Button.vue)")
    assert "FILE: Button.vue (sha256 " in text
    assert "- utilities: @/lib/utils" in text
    assert "Metadata cache:" in result["debug_log_for_text_output"]


@pytest.mark.asyncio
async def test_component_metadata_repeat_call_is_served_from_cache(make_services):
    routes = {
        f"{REGISTRY_BASE_URL}button/index.ts": (200, "export { default as Button } from './Button.vue'\n"),
        f"{REGISTRY_BASE_URL}button/Button.vue": (200, "<script setup>\nimport { cn } from '@/lib/utils'\n</script>"),
    }
    services, transport = make_services(routes)

    first = await component_metadata_impl(ComponentMetadataArgs(name="button"), services)
    assert len(transport.requests) == 2

    routes.clear()
    second = await component_metadata_impl(ComponentMetadataArgs(name="button"), services)

    assert len(transport.requests) == 2
    assert second == first
    assert "EXPORTS:\n- Button (Button.vue)" in second["text_output"]


@pytest.mark.asyncio
async def test_component_metadata_failure(make_services):
    services, _ = make_services({})
    result = await component_metadata_impl(ComponentMetadataArgs(name="button"), services)

    assert result["status"] == ERROR
    assert result["text_output"] == "--- Error ---\nFailed to fetch source code for component: button"


def test_component_metadata_args_reject_charts():
    with pytest.raises(ValueError):
        ComponentMetadataArgs(name="area")


# --- AI backed tools ---


@pytest.mark.asyncio
async def test_create_ui_without_provider(make_services):
    services, _ = make_services({})
    result = await create_ui_impl(CreateUIArgs(description="a settings page"), services)

    assert result["status"] == ERROR
    assert "requires an AI provider" in result["text_output"]


@pytest.mark.asyncio
async def test_create_ui_selects_components_then_generates(make_services, fake_chat):
    selection = {
        "components": [_selection("button"), _selection("mega-menu", "important")],
        "charts": [],
    }
    chat = fake_chat([
        f"Here you go:\n```json\n{json.dumps(selection)}\n```",
        f"```vue\n{GOOD_SFC}```",
    ])
    services, _ = make_services({BUTTON_DOC_URL: (200, BUTTON_DOC)}, chat=chat)

    result = await create_ui_impl(CreateUIArgs(description="a save button"), services)

    text = result["text_output"]
    assert result["status"] == SUCCESS
    assert text.startswith("Selected components: button\n\n```vue\n<template>")
    assert "mega-menu" not in text
    assert text.endswith("call the component-quality-check tool.")

    generation_prompt = chat.calls[1]["messages"][0]["content"]
    assert '<component name="button" necessity="critical">' in generation_prompt
    assert "import { Button } from '@/components/ui/button'" in generation_prompt
    assert chat.calls[0]["messages"][0]["content"] == "<description>a save button</description>"


@pytest.mark.asyncio
async def test_create_ui_accepts_singular_component_key(make_services, fake_chat):
    chat = fake_chat([
        json.dumps({"component": [_selection("button")]}),
        "<template><Button /></template>",
    ])
    services, _ = make_services({}, chat=chat)

    result = await create_ui_impl(CreateUIArgs(description="a button"), services)

    assert result["text_output"].startswith("Selected components: button\n\n```vue\n<template><Button /></template>\n```")


@pytest.mark.asyncio
async def test_create_ui_reports_unusable_selection(make_services, fake_chat):
    services, _ = make_services({}, chat=fake_chat(["I cannot help with that."]))
    result = await create_ui_impl(CreateUIArgs(description="anything"), services)

    assert result["status"] == ERROR
    assert result["text_output"].startswith("--- Error ---\nComponent selection failed")


@pytest.mark.asyncio
async def test_refine_code_sends_file_and_context(make_services, fake_chat, tmp_path):
    component = tmp_path / "Card.vue"
    component.write_text(GOOD_SFC, encoding="utf-8")
    chat = fake_chat(["```vue\n<template><Card class=\"p-6\" /></template>\n```"])
    services, _ = make_services({}, chat=chat)

    result = await refine_code_impl(
        RefineCodeArgs(
            user_message="more padding",
            absolute_path_to_refining_file=str(component),
            context="the card body",
        ),
        services,
    )

    assert result["text_output"] == "```vue\n<template><Card class=\"p-6\" /></template>\n```"
    content = chat.calls[0]["messages"][0]["content"]
    assert f"<refining-component>{GOOD_SFC}</refining-component>" in content
    assert content.endswith("the card body")


@pytest.mark.asyncio
async def test_refine_code_missing_file(make_services, fake_chat, tmp_path):
    chat = fake_chat([])
    services, _ = make_services({}, chat=chat)
    result = await refine_code_impl(
        RefineCodeArgs(user_message="x", absolute_path_to_refining_file=str(tmp_path / "Gone.vue")), services)

    assert result["status"] == ERROR
    assert chat.calls == []


# --- Server dispatch ---


def _ai_settings():
    return AppSettings(_env_file=None, ai_api_key="test-key", ai_model="test/model")


@pytest.mark.asyncio
async def test_list_tools_hides_ai_tools_without_credentials(settings, make_services):
    services, _ = make_services({})
    plain = ShadcnVueMCPServer(settings, services)
    with_ai = ShadcnVueMCPServer(_ai_settings(), services)

    plain_names = {tool.name for tool in await plain.list_tools()}
    ai_names = {tool.name for tool in await with_ai.list_tools()}

    assert "create-ui" not in plain_names and "refine-code" not in plain_names
    assert ai_names == set(TOOLS)
    assert plain_names == ai_names - {"create-ui", "refine-code"}


@pytest.mark.asyncio
async def test_list_tools_schema_comes_from_args_model(settings, make_services):
    services, _ = make_services({})
    tools = {tool.name: tool for tool in await ShadcnVueMCPServer(settings, services).list_tools()}

    schema = tools["component-usage-doc"].inputSchema
    assert set(schema["required"]) == {"type", "name"}
    assert "debug" in schema["properties"]


@pytest.mark.asyncio
async def test_call_tool_appends_debug_log(settings, make_services):
    services, _ = make_services({BUTTON_DOC_URL: (200, BUTTON_DOC)})
    server = ShadcnVueMCPServer(settings, services)

    [content] = await server.call_tool("component-usage-doc", {"type": "components", "name": "button", "debug": True})

    assert "\n\n--- Debug Log ---\nFetched components/button" in content.text


@pytest.mark.asyncio
async def test_call_tool_unknown_and_hidden_tools(settings, make_services):
    services, _ = make_services({})
    server = ShadcnVueMCPServer(settings, services)

    [unknown] = await server.call_tool("make-coffee", {})
    [hidden] = await server.call_tool("create-ui", {"description": "a form"})

    assert unknown.text == "--- Error ---\nUnknown tool: make-coffee"
    assert hidden.text == "--- Error ---\nUnknown tool: create-ui"


@pytest.mark.asyncio
async def test_call_tool_invalid_arguments(settings, make_services):
    services, _ = make_services({})
    server = ShadcnVueMCPServer(settings, services)

    [content] = await server.call_tool("component-usage-doc", {"type": "components", "name": "mega-menu"})

    assert content.text.startswith("--- Error ---\nInvalid arguments for tool 'component-usage-doc'")
    assert "'mega-menu' is not a valid shadcn-vue component" in content.text


@pytest.mark.asyncio
async def test_call_tool_without_services_reports_error_payload(settings):
    server = ShadcnVueMCPServer(settings)

    [content] = await server.call_tool("requirement-structuring", {"message": "x"})

    payload = json.loads(content.text)
    assert payload["status"] == "error"
    assert "Server services are not initialized" in payload["error"]
    assert "Traceback" in payload["traceback"]


@pytest.mark.asyncio
async def test_prompts(settings):
    server = ShadcnVueMCPServer(settings)

    assert [p.name for p in await server.list_prompts()] == ["create-component", "check-component-quality"]

    created = await server.get_prompt("create-component", {"icon": "@nuxt/icon"})
    assert "@nuxt/icon" in created.messages[0].content.text

    default = await server.get_prompt("create-component", None)
    assert "lucide-vue-next" in default.messages[0].content.text

    audit = await server.get_prompt("check-component-quality", {"code": "<template />"})
    assert audit.messages[0].content.text.endswith("```vue\n<template />\n```")

    with pytest.raises(ValueError):
        await server.get_prompt("check-component-quality", {})
    with pytest.raises(ValueError):
        await server.get_prompt("create-component", {"icon": "fontawesome"})
    with pytest.raises(ValueError):
        await server.get_prompt("nope", {})


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "uri",
    [QUALITY_RESOURCE_URI, AnyUrl(QUALITY_RESOURCE_URI), "standards://quality-profile"],
)
async def test_quality_resource(settings, uri):
    server = ShadcnVueMCPServer(settings)

    [resource] = await server.list_resources()
    assert str(resource.uri).rstrip("/") == QUALITY_RESOURCE_URI

    [contents] = await server.read_resource(uri)
    profile = json.loads(contents.content)
    assert contents.mime_type == "application/json"
    assert {"accessibility", "performance", "consistency", "maintainability",
            "developerExperience", "antiPatterns", "qualityScoringSystem"} <= set(profile)


@pytest.mark.asyncio
async def test_unknown_resource(settings):
    with pytest.raises(ValueError):
        await ShadcnVueMCPServer(settings).read_resource("standards://other")


@pytest.mark.asyncio
async def test_quality_prompt_unescapes_single_line_code(settings):
    server = ShadcnVueMCPServer(settings)

    escaped = await server.get_prompt(
        "check-component-quality", {"code": '<template>\\n  <p class=\\"x\\">Hi</p>\\n</template>'})
    literal = await server.get_prompt(
        "check-component-quality", {"code": "<script setup>\nconst s = 'a\\nb'\n</script>"})

    assert escaped.messages[0].content.text.endswith('```vue\n<template>\n  <p class="x">Hi</p>\n</template>\n```')
    assert "const s = 'a\\nb'" in literal.messages[0].content.text
