"""
Fixed catalog of shadcn-vue components, charts and registry demo files.
"""

from typing import Any, Callable, Dict, List, Optional

SHADCN_VUE_COMPONENTS: Dict[str, str] = {
    "accordion": "A vertically stacked set of interactive headings that each reveal a section of content.",
    "alert-dialog": "A modal dialog that interrupts the user with important content and expects a response.",
    "alert": "Displays a callout for user attention.",
    "aspect-ratio": "Displays content within a desired ratio.",
    "auto-form": "Automatically generate a form from Zod schema.",
    "avatar": "An image element with a fallback for representing the user.",
    "badge": "Displays a badge or a component that looks like a badge.",
    "breadcrumb": "Displays the path to the current resource using a hierarchy of links.",
    "button": "Displays a button or a component that looks like a button.",
    "calendar": "A date field component that allows users to enter and edit date.",
    "card": "Displays a card with header, content, and footer.",
    "carousel": "A carousel with motion and swipe built using Embla.",
    "checkbox": "A control that allows the user to toggle between checked and not checked.",
    "collapsible": "An interactive component which expands/collapses a panel.",
    "combobox": "Autocomplete input and command palette with a list of suggestions.",
    "command": "Fast, composable, unstyled command menu.",
    "context-menu": "Displays a menu of actions or functions, triggered by a right click.",
    "data-table": "Powerful table and datagrids built using TanStack Table.",
    "date-picker": "A date picker component with range and presets.",
    "dialog": "A window overlaid on the primary window, rendering the content underneath inert.",
    "drawer": "A drawer component for vue.",
    "dropdown-menu": "Displays a menu of actions or functions, triggered by a button.",
    "form": "Building forms with VeeValidate and Zod.",
    "hover-card": "For sighted users to preview content available behind a link.",
    "input": "Displays a form input field or a component that looks like an input field.",
    "label": "Renders an accessible label associated with controls.",
    "menubar": "A visually persistent menu common in desktop applications.",
    "navigation-menu": "A collection of links for navigating websites.",
    "number-field": "A number input with stepper buttons to increment or decrement the value.",
    "pagination": "Displays data in paged format and provides navigation between pages.",
    "pin-input": "Allows users to input a sequence of one-character alphanumeric inputs.",
    "popover": "Displays rich content in a portal, triggered by a button.",
    "progress": "Displays an indicator showing the completion progress of a task.",
    "radio-group": "A set of checkable buttons where no more than one can be checked at a time.",
    "range-calendar": "A calendar component that allows users to select a range of dates.",
    "resizable": "Accessible resizable panel groups and layouts with keyboard support.",
    "scroll-area": "Augments native scroll functionality for custom, cross-browser styling.",
    "select": "Displays a list of options for the user to pick from, triggered by a button.",
    "separator": "Visually or semantically separates content.",
    "sheet": "Extends the Dialog component to display content that complements the main content of the screen.",
    "sidebar": "A composable, themeable and customizable sidebar component.",
    "skeleton": "Use to show a placeholder while content is loading.",
    "slider": "An input where the user selects a value from within a given range.",
    "sonner": "An opinionated toast component for Vue.",
    "stepper": "A set of steps that are used to indicate progress through a multi-step process.",
    "switch": "A control that allows the user to toggle between checked and not checked.",
    "table": "A responsive table component.",
    "tabs": "A set of layered sections of content, displayed one at a time.",
    "tags-input": "Tag inputs render tags inside an input, followed by an actual text input.",
    "textarea": "Displays a form textarea or a component that looks like a textarea.",
    "toast": "A succinct message that is displayed temporarily.",
    "toggle-group": "A set of two-state buttons that can be toggled on or off.",
    "toggle": "A two-state button that can be either on or off.",
    "tooltip": "A popup that displays information related to an element on focus or hover.",
    "typography": "Styles for headings, paragraphs, lists...etc",
}

SHADCN_VUE_CHARTS: Dict[str, str] = {
    "area": "Represents data over time, displaying trends through filled-in areas under a line graph.",
    "bar": "Compares quantities across categories using rectangular bars of varying lengths.",
    "donut": "Shows proportions within categories in a circular form with a central void.",
    "line": "Displays data points connected by straight lines to illustrate trends.",
}

COMPONENT_KINDS = ("components", "charts")

SHADCN_VUE_DEMOS = (
    "AccordionDemo.vue", "AlertDemo.vue", "AlertDestructiveDemo.vue", "AlertDialogDemo.vue",
    "AreaChartCustomTooltip.vue", "AreaChartDemo.vue", "AreaChartSparkline.vue",
    "AspectRatioDemo.vue", "AutoFormApi.vue", "AutoFormArray.vue", "AutoFormBasic.vue",
    "AutoFormConfirmPassword.vue", "AutoFormControlled.vue", "AutoFormDependencies.vue",
    "AutoFormInputWithoutLabel.vue", "AutoFormSubObject.vue", "AvatarDemo.vue",
    "BadgeDemo.vue", "BadgeDestructiveDemo.vue", "BadgeOutlineDemo.vue",
    "BadgeSecondaryDemo.vue", "BarChartCustomTooltip.vue", "BarChartDemo.vue",
    "BarChartRounded.vue", "BarChartStacked.vue", "BreadcrumbDemo.vue",
    "BreadcrumbDropdown.vue", "BreadcrumbEllipsisDemo.vue", "BreadcrumbLinkDemo.vue",
    "BreadcrumbResponsive.vue", "BreadcrumbSeparatorDemo.vue", "ButtonAsChildDemo.vue",
    "ButtonDemo.vue", "ButtonDestructiveDemo.vue", "ButtonGhostDemo.vue",
    "ButtonIconDemo.vue", "ButtonLinkDemo.vue", "ButtonLoadingDemo.vue",
    "ButtonOutlineDemo.vue", "ButtonSecondaryDemo.vue", "ButtonWithIconDemo.vue",
    "CalendarDemo.vue", "CalendarForm.vue", "CalendarWithSelect.vue", "CardChat.vue",
    "CardDemo.vue", "CardFormDemo.vue", "CardStats.vue", "CardWithForm.vue", "Cards",
    "CarouselApi.vue", "CarouselDemo.vue", "CarouselOrientation.vue", "CarouselPlugin.vue",
    "CarouselSize.vue", "CarouselSpacing.vue", "CarouselThumbnails.vue", "CheckboxDemo.vue",
    "CheckboxDisabled.vue", "CheckboxFormMultiple.vue", "CheckboxFormSingle.vue",
    "CheckboxWithText.vue", "CollapsibleDemo.vue", "ComboboxDemo.vue",
    "ComboboxDropdownMenu.vue", "ComboboxForm.vue", "ComboboxPopover.vue",
    "ComboboxResponsive.vue", "ComboboxTrigger.vue", "CommandDemo.vue",
    "CommandDialogDemo.vue", "CommandDropdownMenu.vue", "CommandForm.vue",
    "CommandPopover.vue", "CommandResponsive.vue", "ContextMenuDemo.vue",
    "CustomChartTooltip.vue", "DataTableColumnPinningDemo.vue", "DataTableDemo.vue",
    "DataTableDemoColumn.vue", "DataTableReactiveDemo.vue", "DatePickerDemo.vue",
    "DatePickerForm.vue", "DatePickerWithIndependentMonths.vue", "DatePickerWithPresets.vue",
    "DatePickerWithRange.vue", "DialogCustomCloseButton.vue", "DialogDemo.vue",
    "DialogForm.vue", "DialogScrollBodyDemo.vue", "DialogScrollOverlayDemo.vue",
    "DonutChartColor.vue", "DonutChartCustomTooltip.vue", "DonutChartDemo.vue",
    "DonutChartPie.vue", "DrawerDemo.vue", "DrawerDialog.vue", "DropdownMenuCheckboxes.vue",
    "DropdownMenuDemo.vue", "DropdownMenuRadioGroup.vue", "HoverCardDemo.vue",
    "InputDemo.vue", "InputDisabled.vue", "InputFile.vue", "InputForm.vue",
    "InputFormAutoAnimate.vue", "InputWithButton.vue", "InputWithIcon.vue",
    "InputWithLabel.vue", "LabelDemo.vue", "LineChartCustomTooltip.vue", "LineChartDemo.vue",
    "LineChartSparkline.vue", "MenubarDemo.vue", "NavigationMenuDemo.vue",
    "NumberFieldCurrency.vue", "NumberFieldDecimal.vue", "NumberFieldDemo.vue",
    "NumberFieldDisabled.vue", "NumberFieldForm.vue", "NumberFieldPercentage.vue",
    "PaginationDemo.vue", "PinInputControlled.vue", "PinInputDemo.vue",
    "PinInputDisabled.vue", "PinInputFormDemo.vue", "PinInputSeparatorDemo.vue",
    "PopoverDemo.vue", "ProgressDemo.vue", "RadioGroupDemo.vue", "RadioGroupForm.vue",
    "RangeCalendarDemo.vue", "ResizableDemo.vue", "ResizableHandleDemo.vue",
    "ResizableVerticalDemo.vue", "ScrollAreaDemo.vue", "ScrollAreaHorizontalDemo.vue",
    "SelectDemo.vue", "SelectForm.vue", "SelectScrollable.vue", "SeparatorDemo.vue",
    "SheetDemo.vue", "SheetSideDemo.vue", "SkeletonCard.vue", "SkeletonDemo.vue",
    "SliderDemo.vue", "SliderForm.vue", "SonnerDemo.vue", "SonnerWithDialog.vue",
    "StepperDemo.vue", "StepperForm.vue", "StepperHorizental.vue", "StepperVertical.vue",
    "SwitchDemo.vue", "SwitchForm.vue", "TableDemo.vue", "TabsDemo.vue",
    "TabsVerticalDemo.vue", "TagsInputComboboxDemo.vue", "TagsInputDemo.vue",
    "TagsInputFormDemo.vue", "TextareaDemo.vue", "TextareaDisabled.vue", "TextareaForm.vue",
    "TextareaWithButton.vue", "TextareaWithLabel.vue", "TextareaWithText.vue",
    "ToastDemo.vue", "ToastDestructive.vue", "ToastSimple.vue", "ToastWithAction.vue",
    "ToastWithTitle.vue", "ToggleDemo.vue", "ToggleDisabledDemo.vue", "ToggleGroupDemo.vue",
    "ToggleGroupDisabledDemo.vue", "ToggleGroupLargeDemo.vue", "ToggleGroupOutlineDemo.vue",
    "ToggleGroupSingleDemo.vue", "ToggleGroupSmallDemo.vue", "ToggleItalicDemo.vue",
    "ToggleItalicWithTextDemo.vue", "ToggleLargeDemo.vue", "ToggleSmallDemo.vue",
    "TooltipDemo.vue", "TypographyBlockquote.vue", "TypographyDemo.vue", "TypographyH1.vue",
    "TypographyH2.vue", "TypographyH3.vue", "TypographyH4.vue", "TypographyInlineCode.vue",
    "TypographyLarge.vue", "TypographyLead.vue", "TypographyList.vue", "TypographyMuted.vue",
    "TypographyP.vue", "TypographySmall.vue", "TypographyTable.vue",
)

NECESSITY_SCORES = {
    "critical": 3,
    "important": 2,
    "optional": 1,
}


def is_valid_component(name: str, kind: Optional[str] = None) -> bool:
    """True if `name` is in the catalog. `kind` narrows the check to components or charts."""
    if kind == "components":
        return name in SHADCN_VUE_COMPONENTS
    if kind == "charts":
        return name in SHADCN_VUE_CHARTS
    return name in SHADCN_VUE_COMPONENTS or name in SHADCN_VUE_CHARTS


def kebab_to_pascal(name: str) -> str:
    return "".join(word[:1].upper() + word[1:] for word in name.split("-"))


def demos_for(name: str) -> List[str]:
    """Registry demo files belonging to a component, matched by PascalCase prefix."""
    prefix = kebab_to_pascal(name)
    return [demo for demo in SHADCN_VUE_DEMOS if demo.startswith(prefix) and demo.endswith(".vue")]


def necessity_filter(threshold: str) -> Callable[[Any], bool]:
    """
    Returns a predicate keeping selections at least as necessary as `threshold`.
    Accepts dicts or objects carrying a `necessity` attribute.
    """
    minimum = NECESSITY_SCORES.get(threshold, 0)

    def _keep(selection: Any) -> bool:
        if isinstance(selection, dict):
            necessity = selection.get("necessity")
        else:
            necessity = getattr(selection, "necessity", None)
        return NECESSITY_SCORES.get(necessity, 0) >= minimum

    return _keep


def format_catalog() -> str:
    lines = ["AVAILABLE COMPONENTS:"]
    lines.extend(f"- {name}: {desc}" for name, desc in SHADCN_VUE_COMPONENTS.items())
    lines.append("")
    lines.append("AVAILABLE CHARTS:")
    lines.extend(f"- {name}: {desc}" for name, desc in SHADCN_VUE_CHARTS.items())
    return "\n".join(lines)
