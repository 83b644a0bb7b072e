"""Core data types for the tipwrap line packer."""

from dataclasses import dataclass, field

TAG_OPEN = "<"
TAG_CLOSE = ">"


@dataclass(frozen=True)
class Token:
    """A single space-delimited piece of normalized text."""
    text: str

    @property
    def opens_tag(self) -> bool:
        return self.text[:1] == TAG_OPEN

    @property
    def closes_tag(self) -> bool:
        return TAG_CLOSE in self.text

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass
class WrapState:
    """Accumulator threaded through one packing pass.

    ``current_line_length`` is the running count used by the length test.
    It is not updated while inside a tag span, so it can be smaller than
    ``len(current_line)``.
    """
    current_line: str = ""
    current_line_length: int = 0
    in_tag: bool = False
    lines: list[str] = field(default_factory=list)

    def flush(self) -> None:
        """Move the current line onto ``lines`` if anything was accumulated."""
        if self.current_line:
            self.lines.append(self.current_line.strip())
