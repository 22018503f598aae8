"""Models describing parsed markers and marker failures."""
from typing import List
from datetime import datetime
from pydantic import BaseModel, Field


class MarkerCall(BaseModel):
    """A single `{{name:param,...}}` occurrence parsed from text."""
    raw: str = Field(description="Full marker text including the braces")
    name: str = Field(description="Trimmed marker name")
    params: List[str] = Field(default_factory=list, description="Trimmed parameters in order")

    @classmethod
    def from_content(cls, content: str, raw: str = "") -> 'MarkerCall':
        """Parse the text between the braces.

        The name ends at the first colon. Everything after it is the parameter
        string, which keeps any further colons (e.g. times) and is split on
        commas.

        Args:
            content: Text between `{{` and `}}`
            raw: Full marker text; rebuilt from content when empty

        Returns:
            MarkerCall: Parsed invocation
        """
        name, _, param_string = content.partition(':')
        params = [p.strip() for p in param_string.split(',')] if param_string else []
        return cls(
            raw=raw or "{{" + content + "}}",
            name=name.strip(),
            params=params,
        )


class MarkerFailure(BaseModel):
    """A marker whose function raised while being resolved."""
    marker: str = Field(description="Marker text that was left unchanged")
    name: str = Field(description="Name of the failing marker")
    error: str = Field(description="Error message raised by the marker function")
    occurred_at: datetime = Field(default_factory=datetime.now)


class RenderResult(BaseModel):
    """Outcome of rendering one piece of text."""
    text: str = Field(description="Text with every resolvable marker replaced")
    failures: List[MarkerFailure] = Field(default_factory=list, description="Markers whose function raised")
    unresolved: List[str] = Field(default_factory=list, description="Marker texts with no registered marker")

    @property
    def ok(self) -> bool:
        """True when every marker in the text was resolved."""
        return not self.failures and not self.unresolved
