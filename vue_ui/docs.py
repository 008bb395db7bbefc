"""
Documentation fetching for shadcn-vue: component markdown docs and registry demos
(served from the jsDelivr CDN with raw GitHub as a fallback mirror), and
library documentation from the context7 API.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import httpx

from vue_ui.catalog import demos_for
from vue_ui.config import AppSettings
from vue_ui.errors import DocumentNotFoundError
from vue_ui.markdown_usage import extract_vue_code_blocks, replace_component_previews

logger = logging.getLogger(__name__)

CDN_BASE_URL = "https://cdn.jsdelivr.net/gh/unovue/shadcn-vue@dev/apps/www"
RAW_GITHUB_BASE_URL = "https://raw.githubusercontent.com/unovue/shadcn-vue/dev/apps/www"
CONTEXT7_API_BASE_URL = "https://context7.com/api"
CONTEXT7_DEFAULT_TYPE = "txt"
CONTEXT7_EMPTY_RESPONSES = ("No content available", "No context data available")
SHADCN_VUE_LIBRARY_ID = "/unovue/shadcn-vue"

CDN_NOT_FOUND_MARKER = '<div class="error-code">404</div>'
NO_DOCUMENTATION = "No documentation found for this component"


@dataclass
class ComponentDemo:
    name: str
    code: str


def build_async_client(settings: Optional[AppSettings] = None) -> httpx.AsyncClient:
    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )


class ShadcnVueDocs:
    """Reads shadcn-vue documentation over HTTP using a shared httpx client."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_urls: Sequence[str] = (CDN_BASE_URL, RAW_GITHUB_BASE_URL),
        context7_base_url: str = CONTEXT7_API_BASE_URL,
    ):
        self.client = client
        self.base_urls = tuple(base_urls)
        self.context7_base_url = context7_base_url

    async def fetch_text(self, path: str) -> str:
        """
        GETs `path` from each mirror in turn and returns the first real document.
        Raises DocumentNotFoundError when every mirror misses.
        """
        path = path.lstrip("/")
        for base_url in self.base_urls:
            url = f"{base_url}/{path}"
            try:
                response = await self.client.get(url)
            except httpx.HTTPError as e:
                logger.warning("Request to %s failed: %s", url, e)
                continue
            if response.is_success and CDN_NOT_FOUND_MARKER not in response.text:
                return response.text
            logger.warning("Document not available at %s (status %s)", url, response.status_code)
        raise DocumentNotFoundError(path, len(self.base_urls))

    async def read_full_component_doc(self, name: str, kind: str = "components") -> str:
        try:
            return await self.fetch_text(f"src/content/docs/{kind}/{name}.md")
        except DocumentNotFoundError as e:
            logger.warning("%s", e)
            return NO_DOCUMENTATION

    async def _fetch_demo(self, demo_file: str) -> Optional[ComponentDemo]:
        try:
            code = await self.fetch_text(f"src/registry/default/examples/{demo_file}")
        except DocumentNotFoundError as e:
            logger.warning("Skipping demo: %s", e)
            return None
        return ComponentDemo(name=demo_file[: -len(".vue")], code=code)

    async def fetch_usage_demos(self, name: str) -> List[ComponentDemo]:
        demo_files = demos_for(name)
        if not demo_files:
            logger.info("No demo found for component '%s'", name)
            return []
        results = await asyncio.gather(*(self._fetch_demo(demo) for demo in demo_files))
        return [demo for demo in results if demo is not None]

    async def read_usage_component_doc(self, name: str, kind: str = "components") -> str:
        """Vue snippets from the Usage section of a component's doc, as one code block."""
        content = await self.read_full_component_doc(name, kind)
        usage_blocks = extract_vue_code_blocks(content)
        joined = "\n".join(usage_blocks)
        return f"````vue\n{joined}\n````"

    async def create_component_doc(self, name: str, kind: str = "components") -> str:
        """Full component doc with ComponentPreview tags expanded to demo source."""
        doc, demos = await asyncio.gather(
            self.read_full_component_doc(name, kind),
            self.fetch_usage_demos(name),
        )
        if doc == NO_DOCUMENTATION:
            return doc
        return replace_component_previews(doc, demos)

    async def fetch_library_documentation(
        self,
        library_id: str,
        tokens: Optional[int] = None,
        topic: Optional[str] = None,
        folders: Optional[str] = None,
    ) -> Optional[str]:
        """Returns the context7 documentation text, or None when nothing usable came back."""
        library_id = library_id.lstrip("/")
        params = {}
        if tokens:
            params["tokens"] = str(tokens)
        if topic:
            params["topic"] = topic
        if folders:
            params["folders"] = folders
        params["type"] = CONTEXT7_DEFAULT_TYPE

        url = f"{self.context7_base_url}/v1/{library_id}"
        try:
            response = await self.client.get(
                url, params=params, headers={"X-Context7-Source": "mcp-server"}
            )
        except httpx.HTTPError as e:
            logger.error("Error fetching library documentation for %s: %s", topic or library_id, e)
            return None
        if not response.is_success:
            logger.error("Failed to fetch documentation: %s", response.status_code)
            return None
        text = response.text
        if not text or text in CONTEXT7_EMPTY_RESPONSES:
            return None
        return text
