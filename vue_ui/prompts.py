"""
Prompt templates handed back to the assistant by the tools. Each tool names the
next tool to call so the assistant walks the generation pipeline in order.
"""

from typing import Any, Dict

from vue_ui.catalog import format_catalog

QUALITY_RESOURCE_URI = "standards://component-quality"
QUALITY_RESOURCE_ALIASES = (QUALITY_RESOURCE_URI, "standards://quality-profile")

REQUIREMENT_STRUCTURING_PROMPT = """You are an expert Vue.js Frontend Architect specializing in shadcn-vue components. Analyze the user requirement below, understand the intent behind it, and produce a JSON blueprint covering both the explicit requirements and the essential features a production-ready component needs.

ANALYSIS APPROACH:
1. Understand what the user is trying to achieve
2. Identify the core functionality they described
3. Add the features a complete component needs (loading, empty and error states)
4. Consider user interactions, edge cases and accessibility
5. Apply industry best practices

USER REQUIREMENT: "{message}"

REQUIRED OUTPUT FORMAT:
Return ONLY a valid JSON object with these exact keys (no explanations, no markdown):

{{
  "main_goal": "One sentence describing the component's core purpose",
  "data_structure": {{
    "property_name": "TypeScript_type - Brief description of purpose"
  }},
  "user_actions": {{
    "actionName": "What triggers this action and its effect"
  }}
}}

EXAMPLE OUTPUT:
{{
  "main_goal": "Display a searchable user table with add/edit dialogs",
  "data_structure": {{
    "users": "User[] - Users to display",
    "searchQuery": "string - Current search filter",
    "isDialogOpen": "boolean - Add/edit dialog visibility",
    "isLoading": "boolean - Loading state"
  }},
  "user_actions": {{
    "searchUsers": "Search input; filters users with debouncing",
    "openAddDialog": "Add button; opens the dialog for a new user",
    "saveUser": "Form submit; validates and saves the user"
  }}
}}

After outputting the JSON, call the components-filter tool."""

FILTER_COMPONENTS_PROMPT = """
CRITICAL: Respond with a valid JSON object in the exact format below. Do not include any text outside the JSON.

As a web UI expert, analyze the provided UI description and identify ONLY the components and charts absolutely necessary to implement the described interface.

STRICT REQUIREMENTS:
- Select components ONLY from the available lists below
- Do not invent components; pick the closest alternative from the lists instead
- The response must be a single object, not an array

ANALYSIS PROCESS:
1. Consider the exact functional requirements in the description
2. Identify the minimum set of components needed
3. Exclude nice-to-have components that are not essential
4. Justify each selection with a brief reason tied to the requirements

{catalog}

REQUIRED OUTPUT FORMAT:
{{
  "components": [
    {{
      "name": "string (from AVAILABLE COMPONENTS)",
      "necessity": "critical|important|optional",
      "justification": "string (1-2 sentences)"
    }}
  ],
  "charts": [
    {{
      "name": "string (from AVAILABLE CHARTS)",
      "necessity": "critical|important|optional",
      "justification": "string (1-2 sentences)"
    }}
  ]
}}
"""

_ICON_GUIDANCE = {
    "lucide": "Use Lucide icons via 'lucide-vue-next' for consistent design system integration",
    "@nuxt/icon": "Use @nuxt/icon for broader icon support with collections like heroicons and tabler",
}

_ICON_EXAMPLE = {
    "lucide": 'Lucide: <Search :size="16" /> (requires lucide-vue-next)',
    "@nuxt/icon": 'Nuxt Icon: <Icon name="heroicons:search" /> (requires @nuxt/icon configuration)',
}

COMPONENT_PROMPT_TEMPLATE = """
<role>
You are an expert Vue.js developer specializing in shadcn-vue components with deep knowledge of accessibility, performance and modern web development practices.
</role>

<context>
Component documentation analysis complete. Ready for the implementation phase.
</context>

<critical_prerequisites>
  <resource_uri>query resource {resource_uri}</resource_uri>
  <description>Quality profile defining all requirements for component generation</description>
  <dimensions>accessibility, performance, consistency, maintainability, developer_experience (20% each)</dimensions>
  <target_quality_level>A or higher (450+ points out of 500)</target_quality_level>
</critical_prerequisites>

<implementation_instructions>
  <instruction priority="critical">Fill in all function logic and complete attribute binding and event listening in the template</instruction>
  <instruction priority="critical">Check every relevant item of the quality standards resource, especially performance, DX, a11y and the anti-patterns</instruction>
  <instruction priority="high">For display components, keep mock data clearly structured and document how to replace it with real data</instruction>
  <instruction priority="high">Review the final code against the quality standards and make sure it reaches at least grade A</instruction>
</implementation_instructions>

<component_constraints>
  <constraint>The Vue component does not accept any props</constraint>
  <constraint>Everything is hard-coded inside the component</constraint>
  <constraint>All required data is included in the generated code</constraint>
</component_constraints>

<assets>
  <images>Load from Unsplash, or use solid colored rectangles as placeholders</images>
  <icons>{icon_guidance}</icons>
</assets>

<component_skeleton>
```vue
<template>
  <!-- Semantic HTML with proper ARIA attributes -->
</template>

<script setup lang="ts">
import {{ ref, computed }} from 'vue'
// shadcn-vue component imports
// Icons: {icon_example}
</script>
```
</component_skeleton>
"""

CHECK_COMPONENT_QUALITY_PROMPT = """
You are `Component-Auditor`, a quality assurance engine auditing Vue.js components against a strict set of quality standards.

Process:
1. Read the Vue component code provided below.
2. Go through the checklist item by item.
3. Mark a passing item as `[✅]`.
4. Mark a failing item as `[❌]` and add a short, actionable note below it describing the violation and a fix.
5. Output the complete marked-up checklist.

## Component Quality Checklist

### 1. Accessibility (A11y)
- `[ ]` **Semantic HTML:** the most appropriate HTML5 tags are used.
- `[ ]` **ARIA Labels:** icon-only and non-descriptive controls carry an `aria-label`.
- `[ ]` **ARIA States:** `aria-expanded`, `aria-selected` and similar states reflect the UI.
- `[ ]` **Keyboard Navigable:** every interactive element is reachable and operable by keyboard.
- `[ ]` **Focus Management:** focus is trapped in modals and restored on close.
- `[ ]` **Color Contrast:** text contrast meets WCAG 2.1 AA (4.5:1).
- `[ ]` **Reduced Motion:** animations respect `prefers-reduced-motion`.

### 2. Performance
- `[ ]` **Render Optimization:** no complex calls in the template, `computed` used for derived state.
- `[ ]` **Lazy Loading:** non-critical assets are lazy-loaded.
- `[ ]` **Cleanup:** listeners, timers and observers are released in `onUnmounted`.
- `[ ]` **Mock Data Management:** mock data is clearly structured and easy to replace.

### 3. Consistency
- `[ ]` **Design Tokens:** styling uses the shadcn-vue CSS custom properties.
- `[ ]` **API Naming:** props and emits follow consistent naming.
- `[ ]` **Behavior:** loading, error and empty states are handled.
- `[ ]` **JSDoc:** public functions, props and emits are documented.

### 4. Maintainability
- `[ ]` **Single Responsibility:** the component is not overly complex.
- `[ ]` **Composition API:** logic is organized in `<script setup>` blocks.
- `[ ]` **Anti-Patterns:** no `v-html`, no prop mutation, no deep `v-if` nesting.
- `[ ]` **Cyclomatic Complexity:** functions stay below 10.

### 5. Developer Experience (DX)
- `[ ]` **Strict TypeScript:** no `any`.
- `[ ]` **Flexibility via Slots:** slots allow structural customization.
- `[ ]` **Mock Data Guidance:** comments explain how to swap in real data.

## Scoring
Score each dimension 0-100 (total 0-500) and assign a grade:
A+ (450-500), A (400-449), B+ (350-399), B (300-349), C (200-299), F (0-199).
Summarize strengths and improvements. If the grade is below B+, modify and optimize the component.
"""

COMPONENT_BUILDER_PROMPT = """
You are a code generation engine. Generate Vue 3 components that meet the highest quality standards using the shadcn-vue component library.

IMPORTANT: before proceeding, read the quality standards resource:
- query resource {resource_uri}
- five dimensions: Accessibility, Performance, Consistency, Maintainability, Developer Experience
- target quality level: A or higher (450+ points out of 500)

Use the following MCP tools one after the other in this exact sequence, applying the quality standards at each stage:

1. requirement-structuring, user requirement: {message}
2. components-filter
3. all-components-doc

After the component is written, call component-quality-check with its absolute path.
"""

CREATE_UI_SYSTEM_PROMPT = """You are an expert Vue.js developer specializing in modern, professional UI design using shadcn-vue and Tailwind CSS.

- Vue 3 + Composition API (`<script setup lang="ts">`)
- Tailwind CSS following shadcn-vue patterns, 8px spacing grid, light theme
- Hard-coded realistic sample data (no props)
- Mobile-first responsive layout with sm:, md:, lg: breakpoints
- Semantic HTML, ARIA labels and keyboard navigation

Return only the complete single-file component inside one ```vue code block."""

REFINE_UI_SYSTEM_PROMPT = """You are an expert in UI/UX design and Tailwind CSS. Optimize the provided Vue component to create a professional, refined and production-ready interface. The component is static, with no props, and all data is hard-coded.

Focus on: harmonious color palette, typography, visual hierarchy, whitespace, subtle transitions, consistent design language and accessibility. Only change what the user asked for plus what the context implies.

Return only the complete refined single-file component inside one ```vue code block."""


def get_requirement_structuring_prompt(message: str) -> str:
    return REQUIREMENT_STRUCTURING_PROMPT.format(message=message)


def get_filter_components_prompt() -> str:
    return FILTER_COMPONENTS_PROMPT.format(catalog=format_catalog())


def get_component_prompt(icon: str = "lucide") -> str:
    if icon not in _ICON_GUIDANCE:
        raise ValueError(f"Unsupported icon library: {icon}")
    return COMPONENT_PROMPT_TEMPLATE.format(
        resource_uri=QUALITY_RESOURCE_URI,
        icon_guidance=_ICON_GUIDANCE[icon],
        icon_example=_ICON_EXAMPLE[icon],
    )


def get_component_builder_prompt(message: str) -> str:
    return COMPONENT_BUILDER_PROMPT.format(resource_uri=QUALITY_RESOURCE_URI, message=message)


def get_quality_standard() -> Dict[str, Any]:
    """Structured quality profile served as the standards resource."""
    return {
        "qualityProfile": {
            "accessibility": {
                "description": "Standards to ensure the component is accessible to all users",
                "coreRequirements": ["WCAG 2.1 AA level compliance", "Semantic HTML", "Keyboard navigation"],
                "specificStandards": {
                    "semanticHTML": {"properHTMLTags": True, "meaningfulHeadings": True, "landmarkRoles": True},
                    "ariaSupport": {"ariaLabels": True, "ariaDescribedby": True, "ariaStates": True, "ariaLive": True},
                    "keyboardNavigation": {"tabIndex": True, "focusManagement": True, "escapeKey": True},
                    "visualDesign": {"colorContrast": 4.5, "focusIndicators": True, "motionReduction": True},
                },
            },
            "performance": {
                "description": "Performance standards to ensure the component runs efficiently",
                "coreRequirements": ["Fast loading", "Efficient rendering", "Memory optimization", "Lightweight"],
                "specificStandards": {
                    "loading": {"bundleSizeKb": 50, "initialRenderMs": 100},
                    "runtime": {"rerenderOptimization": True, "lazyLoading": True, "virtualScrolling": True},
                    "memory": {"eventCleanup": True, "observerCleanup": True, "timersCleanup": True},
                },
            },
            "consistency": {
                "description": "Standards to ensure consistency in design, behavior, and API",
                "coreRequirements": ["Design consistency", "Behavior consistency", "API consistency"],
                "designSystemIntegration": {
                    "colorSystem": "CSS custom properties",
                    "spacingSystem": "4px/8px grid",
                },
            },
            "maintainability": {
                "description": "Standards to ensure the component is easy to maintain and update",
                "coreRequirements": ["Clear code", "Modular design", "Complete documentation"],
                "codeQualityMetrics": {"cyclomaticComplexity": 10, "codeDuplicationPercent": 5},
            },
            "developerExperience": {
                "description": "Standards to ensure a developer-friendly experience",
                "coreRequirements": ["Easy to use", "Quick to get started", "Easy to integrate"],
                "specificStandards": {
                    "typeScript": {"strictTypes": True, "autocompletion": True},
                    "learningCurve": {"examples": True, "mockDataGuidance": True},
                },
            },
            "antiPatterns": {
                "description": "Practices to avoid under any circumstances",
                "rules": [
                    "Do not use v-html directive unless explicitly required and for safe content",
                    "Do not use 'any' type in <script setup>",
                    "Do not make API requests directly inside the component",
                    "Avoid component nesting deeper than three levels",
                    "Do not use '!important' in CSS",
                ],
            },
            "qualityScoringSystem": {
                "dimensions": [
                    "accessibility",
                    "performance",
                    "consistency",
                    "maintainability",
                    "developerExperience",
                ],
                "scoring": {"maxPerDimension": 100, "totalMax": 500},
                "grades": {
                    "A+": [450, 500],
                    "A": [400, 449],
                    "B+": [350, 399],
                    "B": [300, 349],
                    "C": [200, 299],
                    "F": [0, 199],
                },
            },
        }
    }
