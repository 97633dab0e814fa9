"""Tagged content for decorative side panels.

A panel shows exactly one kind of content. The kind is an enum tag and the
payload is plain text, so the renderer can switch on ``kind`` without any
class hierarchy.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PanelKind(StrEnum):
    """What a side panel displays."""

    CODE = "code"
    ERROR = "error"
    IMAGE = "image"
    COMPARE = "compare"


class CompareColumn(BaseModel):
    """One column of a side-by-side comparison."""

    model_config = ConfigDict(frozen=True)

    title: str
    items: tuple[str, ...] = ()


class PanelContent(BaseModel):
    """A panel payload tagged with its kind.

    Only the fields relevant to ``kind`` may be set:

    - ``code``: ``code``
    - ``error``: ``lines``
    - ``image``: ``src`` (plus optional ``alt`` and ``caption``)
    - ``compare``: ``columns``
    """

    model_config = ConfigDict(frozen=True)

    kind: PanelKind
    code: str | None = None
    lines: tuple[str, ...] = ()
    src: str | None = None
    alt: str = ""
    caption: str = ""
    columns: tuple[CompareColumn, ...] = Field(default=())

    @model_validator(mode="after")
    def check_payload(self) -> "PanelContent":
        """Ensure the payload matches the tag."""
        if self.kind is PanelKind.CODE and not self.code:
            raise ValueError("code panels require 'code'")
        if self.kind is PanelKind.ERROR and not self.lines:
            raise ValueError("error panels require at least one line")
        if self.kind is PanelKind.IMAGE and not self.src:
            raise ValueError("image panels require 'src'")
        if self.kind is PanelKind.COMPARE and not self.columns:
            raise ValueError("compare panels require at least one column")
        return self
