"""Canonical design model consumed by every export adapter.

This module defines the contract between the upstream design producer and
the export layer: a flat list of positioned components plus a design-token
set. Models are validated with pydantic and accept both the wire spelling
(``bgColor``) and the Python spelling (``bg_color``) of each field.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class UnknownFormatError(ValueError):
    """Raised when an export format selector is not recognised."""

    def __init__(self, value: Any):
        available = ", ".join(f.value for f in ExportFormat)
        super().__init__(f"Unknown export format '{value}'. Available: {available}")
        self.value = value


class ExportFormat(str, Enum):
    """Closed set of export targets.

    - FRAMER: component/property-tree document (Component-Graph)
    - FIGMA: graphic node tree (Node-Document)
    - WEBFLOW: CMS site with one page (CMS-Page)
    - HTML: self-contained HTML/CSS document (Markup)
    """

    FRAMER = "framer"
    FIGMA = "figma"
    WEBFLOW = "webflow"
    HTML = "html"

    @property
    def file_extension(self) -> str:
        """Extension without the leading dot."""
        return "html" if self is ExportFormat.HTML else "json"

    @property
    def content_type(self) -> str:
        """MIME type used when storing the payload."""
        return "text/html" if self is ExportFormat.HTML else "application/json"

    @classmethod
    def parse(cls, value: "ExportFormat | str") -> "ExportFormat":
        """Resolve a selector to a member.

        Raises:
            UnknownFormatError: If the selector names no format.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownFormatError(value) from None


class Component(BaseModel):
    """A positioned block of the design.

    Attributes:
        id: Identifier, unique within one export call.
        type: Open type tag such as "hero" or "features".
        title: Heading text.
        content: Body text.
        x: Horizontal offset as a percentage of container width.
        y: Vertical offset in pixels.
        width: Width as a percentage of container width.
        height: Height in pixels.
        bg_color: Background hex color (wire name ``bgColor``), may be malformed.
        text_color: Text hex color (wire name ``textColor``), may be malformed.
        properties: Extra attributes merged verbatim into some formats.
    """

    id: str = Field(..., description="Identifier unique within the design")
    type: str = Field(..., description="Open component type tag")
    title: str = Field(default="", description="Heading text")
    content: str = Field(default="", description="Body text")
    x: int | float = Field(default=0, description="Left offset in percent")
    y: int | float = Field(default=0, description="Top offset in pixels")
    width: int | float = Field(default=100, description="Width in percent")
    height: int | float = Field(default=400, description="Height in pixels")
    bg_color: str = Field(default="#FFFFFF", alias="bgColor")
    text_color: str = Field(default="#000000", alias="textColor")
    properties: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        # Stored designs sometimes carry numeric ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("title", "content", "properties", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return {} if info.field_name == "properties" else ""
        return value

    @field_validator("bg_color", "text_color", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class DesignTokens(BaseModel):
    """Named colors, typography and spacing values shared across components.

    Missing or null groups become empty mappings. Unknown groups (for
    example ``shadows``) are kept so they survive verbatim copies.
    """

    colors: dict[str, Any] = Field(default_factory=dict)
    typography: dict[str, Any] = Field(default_factory=dict)
    spacing: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("colors", "typography", "spacing", mode="before")
    @classmethod
    def _default_missing_group(cls, value: Any) -> Any:
        return {} if value is None else value

    def groups(self) -> dict[str, Any]:
        """All token groups, declared groups first."""
        return self.model_dump()


@dataclass(frozen=True)
class CanonicalDesign:
    """Read-only view over the components and tokens of one export call.

    Example:
        >>> design = CanonicalDesign.build(
        ...     [{"id": "c1", "type": "hero", "title": "Hi"}],
        ...     {"colors": {"primary": "#3B82F6"}},
        ... )
        >>> design.component_ids
        ('c1',)
        >>> design.spacing
        {}
    """

    components: tuple[Component, ...] = ()
    tokens: DesignTokens = field(default_factory=DesignTokens)

    @classmethod
    def build(
        cls,
        components: Iterable[Component | Mapping[str, Any]] | None = None,
        tokens: DesignTokens | Mapping[str, Any] | None = None,
    ) -> "CanonicalDesign":
        """Validate raw inputs into a design.

        Raises:
            ValueError: If ``components`` is not a sequence of records.
            pydantic.ValidationError: If a component record is malformed.
        """
        if components is None:
            components = ()
        elif isinstance(components, (str, bytes, Mapping)) or not isinstance(
            components, Iterable
        ):
            raise ValueError(
                f"components must be a list of records, got {type(components).__name__}"
            )
        parsed = tuple(
            c if isinstance(c, Component) else Component.model_validate(c)
            for c in components
        )
        if not isinstance(tokens, DesignTokens):
            tokens = DesignTokens.model_validate(tokens or {})
        return cls(components=parsed, tokens=tokens)

    @classmethod
    def from_payload(
        cls,
        design_data: Any,
        design_tokens: Mapping[str, Any] | None = None,
    ) -> "CanonicalDesign":
        """Build a design from stored JSON.

        Args:
            design_data: Either a list of component records or a mapping
                with a ``components`` list (and optionally ``designTokens``).
            design_tokens: Token mapping; takes precedence over any
                ``designTokens`` embedded in ``design_data``.
        """
        if isinstance(design_data, Mapping):
            if design_tokens is None:
                design_tokens = design_data.get("designTokens")
            design_data = design_data.get("components")
        return cls.build(design_data, design_tokens)

    @property
    def colors(self) -> dict[str, Any]:
        return self.tokens.colors

    @property
    def typography(self) -> dict[str, Any]:
        return self.tokens.typography

    @property
    def spacing(self) -> dict[str, Any]:
        return self.tokens.spacing

    @property
    def component_ids(self) -> tuple[str, ...]:
        """Component ids in input order."""
        return tuple(c.id for c in self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)


@dataclass
class ExportWarning:
    """Diagnostic for input that was decoded leniently.

    Attributes:
        code: Machine-readable kind (e.g. "malformed_color").
        message: Human-readable explanation.
        component_id: Component involved, if any.
        value: Offending value (optional).
    """

    code: str
    message: str
    component_id: str | None = None
    value: str | None = None


@dataclass
class ExportResult:
    """Descriptor of a persisted export.

    Attributes:
        url: Retrievable location of the stored artifact.
        file_key: Storage-internal key.
        format: Export format.
        file_name: Suggested download name.
        content_type: MIME type the payload was stored with.
        size_bytes: Size of the stored payload.
        warnings: Lenient-decode diagnostics gathered while rendering.
    """

    url: str
    file_key: str
    format: ExportFormat
    file_name: str
    content_type: str = ""
    size_bytes: int = 0
    warnings: list[ExportWarning] = field(default_factory=list)

    def to_dict(self) -> dict[str, str]:
        """Wire shape returned to API callers."""
        return {
            "url": self.url,
            "fileKey": self.file_key,
            "format": self.format.value,
            "fileName": self.file_name,
        }


__all__ = [
    "CanonicalDesign",
    "Component",
    "DesignTokens",
    "ExportFormat",
    "ExportResult",
    "ExportWarning",
    "UnknownFormatError",
]
