import asyncio
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from vue_ui.ai_client import ChatModel, extract_json_object, extract_vue_code
from vue_ui.catalog import is_valid_component, necessity_filter
from vue_ui.config import AppSettings
from vue_ui.context_processing import (
    convert_to_structured_markdown,
    format_component_metadata,
    format_stats_for_text_output,
)
from vue_ui.docs import NO_DOCUMENTATION, SHADCN_VUE_LIBRARY_ID, ShadcnVueDocs
from vue_ui.errors import AIProviderError
from vue_ui.metadata import MetadataCache, ShadcnVueMetadataExtractor
from vue_ui.models import (
    AllComponentsDocArgs,
    ComponentBuilderArgs,
    ComponentMetadataArgs,
    ComponentSelection,
    ComponentUsageDocArgs,
    CreateUIArgs,
    FilterArgs,
    FilteredComponents,
    MessageArgs,
    QualityCheckArgs,
    RefineCodeArgs,
)
from vue_ui.prompts import (
    CHECK_COMPONENT_QUALITY_PROMPT,
    CREATE_UI_SYSTEM_PROMPT,
    REFINE_UI_SYSTEM_PROMPT,
    get_component_builder_prompt,
    get_component_prompt,
    get_filter_components_prompt,
    get_requirement_structuring_prompt,
)
from vue_ui.serializer import is_valid_vue_component

logger = logging.getLogger(__name__)

SUCCESS = "success_text_output"
PARTIAL = "partial_text_output"
ERROR = "error_text_output"


@dataclass
class ToolServices:
    """Shared dependencies handed to every tool implementation."""
    settings: AppSettings
    docs: ShadcnVueDocs
    metadata: ShadcnVueMetadataExtractor
    chat: Optional[ChatModel] = None

    @classmethod
    def create(cls, settings: AppSettings, client: httpx.AsyncClient) -> "ToolServices":
        cache = MetadataCache(
            max_age_seconds=settings.metadata_cache_max_age_seconds,
            max_size=settings.metadata_cache_max_size,
        )
        chat = ChatModel.from_settings(settings) if settings.ai_enabled else None
        return cls(
            settings=settings,
            docs=ShadcnVueDocs(client),
            metadata=ShadcnVueMetadataExtractor(client, cache),
            chat=chat,
        )


def _error(message: str) -> Dict[str, Any]:
    return {"status": ERROR, "text_output": f"--- Error ---\n{message}"}


def _with_debug(result: Dict[str, Any], debug_mode: bool, debug_log: List[str]) -> Dict[str, Any]:
    if debug_mode:
        result["debug_log_for_text_output"] = "\n".join(debug_log)
    return result


def _read_component_file(path_str: str) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
    """Returns (content, None) or (None, error result) for an absolute file path."""
    path = Path(path_str)
    if not path.is_absolute():
        return None, _error(f"Path '{path_str}' must be an absolute path.")
    try:
        if not path.is_file():
            return None, _error(f"Component file '{path_str}' not found or not a file")
        return path.read_text(encoding="utf-8"), None
    except (OSError, UnicodeDecodeError) as e:
        return None, _error(f"Could not read '{path_str}': {e}")


async def requirement_structuring_impl(params: MessageArgs, services: ToolServices) -> Dict[str, Any]:
    return {"status": SUCCESS, "text_output": get_requirement_structuring_prompt(params.message)}


async def components_filter_impl(params: FilterArgs, services: ToolServices) -> Dict[str, Any]:
    prompt = (
        f"{get_filter_components_prompt()}\n"
        f"<user-message>{params.message}</user-message>\n"
        "After outputting the json, call the all-components-doc tool"
    )
    return {"status": SUCCESS, "text_output": prompt}


async def component_builder_impl(params: ComponentBuilderArgs, services: ToolServices) -> Dict[str, Any]:
    return {"status": SUCCESS, "text_output": get_component_builder_prompt(params.message)}


async def component_usage_doc_impl(params: ComponentUsageDocArgs, services: ToolServices) -> Dict[str, Any]:
    debug_log: List[str] = []
    start_time = time.time()

    doc = await services.docs.create_component_doc(params.name, params.type)
    if params.debug:
        debug_log.append(
            f"Fetched {params.type}/{params.name} in {time.time() - start_time:.2f}s ({len(doc)} chars)")

    status = PARTIAL if doc == NO_DOCUMENTATION else SUCCESS
    return _with_debug({"status": status, "text_output": doc}, params.debug, debug_log)


async def all_components_doc_impl(params: AllComponentsDocArgs, services: ToolServices) -> Dict[str, Any]:
    """
    Fetches library documentation for every kept component and chart concurrently,
    and returns it as structured markdown followed by the component creation prompt.
    """
    debug_log: List[str] = []
    start_time = time.time()
    keep = necessity_filter(params.min_necessity)

    async def _fetch(selection: ComponentSelection) -> Dict[str, Any]:
        doc = await services.docs.fetch_library_documentation(
            SHADCN_VUE_LIBRARY_ID,
            tokens=services.settings.docs_tokens,
            topic=selection.name,
        )
        return {
            "name": selection.name,
            "necessity": selection.necessity,
            "justification": selection.justification,
            "doc": doc,
        }

    kept_components = [c for c in params.components if keep(c)]
    kept_charts = [c for c in params.charts if keep(c)]
    skipped = len(params.components) + len(params.charts) - len(kept_components) - len(kept_charts)
    if params.debug and skipped:
        debug_log.append(f"Skipped {skipped} selection(s) below necessity '{params.min_necessity}'")

    component_results, chart_results = await asyncio.gather(
        asyncio.gather(*(_fetch(c) for c in kept_components)),
        asyncio.gather(*(_fetch(c) for c in kept_charts)),
    )
    entries = {"components": list(component_results), "charts": list(chart_results)}

    missing = [e["name"] for e in entries["components"] + entries["charts"] if not e["doc"]]
    if missing:
        logger.warning("No documentation returned for: %s", ", ".join(missing))

    structured_markdown = convert_to_structured_markdown(entries)
    text_output = f"{structured_markdown}\n{get_component_prompt(services.settings.icon_library)}"

    if params.debug:
        stats = {
            "selections_requested": len(params.components) + len(params.charts),
            "selections_documented": len(kept_components) + len(kept_charts) - len(missing),
            "missing_documentation": len(missing),
            "overall_fetch_duration_seconds": time.time() - start_time,
        }
        debug_log.append(format_stats_for_text_output(stats, "Documentation Stats").strip())

    status = PARTIAL if missing else SUCCESS
    return _with_debug({"status": status, "text_output": text_output}, params.debug, debug_log)


async def component_quality_check_impl(params: QualityCheckArgs, services: ToolServices) -> Dict[str, Any]:
    component_code, error_result = _read_component_file(params.absolute_component_path)
    if error_result is not None:
        return error_result

    output_parts = [CHECK_COMPONENT_QUALITY_PROMPT]
    if not is_valid_vue_component(component_code):
        output_parts.append(
            "[Warning: The file does not contain both a <template> and a <script> block.]")
    output_parts.append(f"```vue\n{component_code}```")
    return {"status": SUCCESS, "text_output": "\n".join(output_parts)}


async def component_metadata_impl(params: ComponentMetadataArgs, services: ToolServices) -> Dict[str, Any]:
    debug_log: List[str] = []
    extractor = services.metadata

    result = await extractor.extract_component_metadata(params.name)
    if params.debug:
        debug_log.append(f"Metadata cache: {extractor.cache.stats()}")

    if not result.success:
        return _with_debug(_error(result.error or "Unknown metadata error"), params.debug, debug_log)

    # served from the entry cached above
    files = await extractor.extract_all_component_files(params.name)
    text_output = format_component_metadata(params.name, files["all_files"], result.metadata or [])
    return _with_debug({"status": SUCCESS, "text_output": text_output}, params.debug, debug_log)


async def create_ui_impl(params: CreateUIArgs, services: ToolServices) -> Dict[str, Any]:
    """
    LLM-backed generation: the model selects catalog components for the description,
    their usage snippets are fetched, then the model writes the component.
    """
    if services.chat is None:
        return _error("create-ui requires an AI provider; set OPENROUTER_API_KEY and OPENROUTER_MODEL_ID.")

    try:
        selection_text = await services.chat.generate_text(
            system=get_filter_components_prompt(),
            messages=[{"role": "user", "content": f"<description>{params.description}</description>"}],
            max_tokens=2000,
        )
        selection = FilteredComponents.model_validate(extract_json_object(selection_text))
    except (AIProviderError, ValidationError) as e:
        return _error(f"Component selection failed: {e}")

    keep = necessity_filter("optional")
    chosen = [("components", c) for c in selection.components if keep(c)]
    chosen += [("charts", c) for c in selection.charts if keep(c)]
    unknown = [c.name for kind, c in chosen if not is_valid_component(c.name, kind)]
    if unknown:
        logger.info("Dropping components outside the catalog: %s", ", ".join(unknown))
    chosen = [(kind, c) for kind, c in chosen if is_valid_component(c.name, kind)]

    usage_docs = await asyncio.gather(
        *(services.docs.read_usage_component_doc(c.name, kind) for kind, c in chosen)
    )
    component_context = "\n".join(
        f'<component name="{c.name}" necessity="{c.necessity}">\n{usage}\n</component>'
        for (kind, c), usage in zip(chosen, usage_docs)
    )

    try:
        reply = await services.chat.generate_text(
            system=CREATE_UI_SYSTEM_PROMPT,
            messages=[{
                "role": "user",
                "content": f"<description>{params.description}</description>\n{component_context}",
            }],
            max_tokens=8192,
        )
    except AIProviderError as e:
        return _error(f"Component generation failed: {e}")

    names = ", ".join(c.name for _, c in chosen) or "none"
    text_output = (
        f"Selected components: {names}\n\n"
        f"```vue\n{extract_vue_code(reply)}\n```\n\n"
        "After adding this component to the codebase, call the component-quality-check tool."
    )
    return {"status": SUCCESS, "text_output": text_output}


async def refine_code_impl(params: RefineCodeArgs, services: ToolServices) -> Dict[str, Any]:
    if services.chat is None:
        return _error("refine-code requires an AI provider; set OPENROUTER_API_KEY and OPENROUTER_MODEL_ID.")

    file_content, error_result = _read_component_file(params.absolute_path_to_refining_file)
    if error_result is not None:
        return error_result

    try:
        reply = await services.chat.generate_text(
            system=REFINE_UI_SYSTEM_PROMPT,
            messages=[{
                "role": "user",
                "content": (
                    f"<description>{params.user_message}</description>\n"
                    f"<refining-component>{file_content}</refining-component>\n"
                    f"{params.context}"
                ),
            }],
            max_tokens=8192,
        )
    except AIProviderError as e:
        return _error(f"Refinement failed: {e}")

    return {"status": SUCCESS, "text_output": f"```vue\n{extract_vue_code(reply)}\n```"}
