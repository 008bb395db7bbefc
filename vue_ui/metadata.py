"""
Component metadata extraction from the shadcn-vue registry, with an in-memory
cache bounded by age and size.
"""

import asyncio
import hashlib
import logging
import re
import time
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

REGISTRY_BASE_URL = "https://cdn.jsdelivr.net/gh/unovue/shadcn-vue@dev/apps/v4/registry/new-york-v4/ui/"
DEFAULT_MAX_AGE_SECONDS = 24 * 60 * 60
DEFAULT_MAX_SIZE = 100

_DEFAULT_EXPORT_RE = re.compile(r"""export\s+\{\s*default\s+as\s+(\w+)\s*\}\s+from\s+['"`]\./([^'"`]+)['"`]""")
_NAMED_EXPORT_RE = re.compile(r"""export\s+\{\s*(\w+)\s*\}\s+from\s+['"`]\./([^'"`]+)['"`]""")
_IMPORT_RE = re.compile(r"""import\s+(?:\{[^}]*\}|\*\s+as\s+\w+|\w+)\s+from\s+['"`]([^'"`]+)['"`]""")


class ComponentExport(BaseModel):
    export_name: str
    file_name: str


class DependencyMetadata(BaseModel):
    components: List[str] = Field(default_factory=list)
    utilities: List[str] = Field(default_factory=list)
    styles: List[str] = Field(default_factory=list)


class ComponentMetadata(BaseModel):
    name: str
    file_name: str
    dependencies: DependencyMetadata = Field(default_factory=DependencyMetadata)
    extracted_at: datetime
    source_hash: str
    version: str = "latest"


class MetadataExtractionResult(BaseModel):
    success: bool
    metadata: Optional[List[ComponentMetadata]] = None
    exports: List[ComponentExport] = Field(default_factory=list)
    index_content: str = ""
    error: Optional[str] = None


class MetadataCache:
    """
    Insertion-ordered cache. Entries expire after `max_age_seconds`; when full,
    the oldest inserted entry is evicted to make room.
    """

    def __init__(
        self,
        max_age_seconds: float = DEFAULT_MAX_AGE_SECONDS,
        max_size: int = DEFAULT_MAX_SIZE,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_age_seconds = max_age_seconds
        self.max_size = max_size
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, MetadataExtractionResult]]" = OrderedDict()

    def get(self, name: str) -> Optional[MetadataExtractionResult]:
        entry = self._entries.get(name)
        if entry is None:
            return None
        cached_at, result = entry
        if self._clock() - cached_at > self.max_age_seconds:
            del self._entries[name]
            return None
        return result

    def set(self, name: str, result: MetadataExtractionResult) -> None:
        if name in self._entries:
            del self._entries[name]
        elif len(self._entries) >= self.max_size:
            self._entries.popitem(last=False)
        self._entries[name] = (self._clock(), result)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def stats(self) -> Dict[str, Any]:
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "max_age_seconds": self.max_age_seconds,
        }


def parse_component_exports(index_content: str) -> List[ComponentExport]:
    """Reads `export { default as X } from './X.vue'` lines of a registry index.ts."""
    matches = _DEFAULT_EXPORT_RE.findall(index_content)
    if not matches:
        matches = _NAMED_EXPORT_RE.findall(index_content)
    return [ComponentExport(export_name=export, file_name=file) for export, file in matches]


def extract_dependencies(source_code: str) -> DependencyMetadata:
    dependencies = DependencyMetadata()
    for import_path in _IMPORT_RE.findall(source_code):
        if "components/" in import_path:
            dependencies.components.append(import_path)
        elif "utils/" in import_path or "lib/" in import_path:
            dependencies.utilities.append(import_path)
        elif ".css" in import_path or ".scss" in import_path:
            dependencies.styles.append(import_path)
    return dependencies


class ShadcnVueMetadataExtractor:
    """
    Reads a component's registry `index.ts` once, then every exported file, and
    caches the exports together with the per-file metadata.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: Optional[MetadataCache] = None,
        registry_base_url: str = REGISTRY_BASE_URL,
    ):
        self.client = client
        self.cache = cache if cache is not None else MetadataCache()
        self.registry_base_url = registry_base_url

    async def _get(self, path: str) -> str:
        response = await self.client.get(f"{self.registry_base_url}{path}")
        response.raise_for_status()
        return response.text

    async def extract_all_component_files(self, name: str) -> Dict[str, Any]:
        """Exported files of a component plus the raw index.ts; empty on failure."""
        cached = self.cache.get(name)
        if cached is not None:
            return {"all_files": cached.exports, "index_content": cached.index_content}
        try:
            index_content = await self._get(f"{name}/index.ts")
        except httpx.HTTPError as e:
            logger.warning("Failed to fetch component files for %s: %s", name, e)
            return {"all_files": [], "index_content": ""}
        return {
            "all_files": parse_component_exports(index_content),
            "index_content": index_content,
        }

    async def extract_component_metadata(
        self, name: str, use_cache: bool = True
    ) -> MetadataExtractionResult:
        if use_cache:
            cached = self.cache.get(name)
            if cached is not None:
                return cached

        try:
            index_content = await self._get(f"{name}/index.ts")
            exports = parse_component_exports(index_content)
            sources = await asyncio.gather(
                *(self._get(f"{name}/{export.file_name}") for export in exports)
            )
        except httpx.HTTPError as e:
            logger.warning("Failed to fetch source for %s: %s", name, e)
            return MetadataExtractionResult(
                success=False, error=f"Failed to fetch source code for component: {name}"
            )

        now = datetime.now(timezone.utc)
        metadata = [
            ComponentMetadata(
                name=name,
                file_name=export.file_name,
                dependencies=extract_dependencies(source),
                extracted_at=now,
                source_hash=hashlib.sha256(source.encode("utf-8")).hexdigest(),
            )
            for export, source in zip(exports, sources)
        ]
        result = MetadataExtractionResult(
            success=True, metadata=metadata, exports=exports, index_content=index_content
        )
        if use_cache:
            self.cache.set(name, result)
        return result
