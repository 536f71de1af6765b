"""
Text-generation interface used by the prompt generator.
Implementations make exactly one upstream call per generate_text and may raise on any failure;
callers own the fallback policy.
"""
from typing import Protocol


class TextGenerator(Protocol):
    """Opaque text-generation function with a best-effort JSON contract."""

    def generate_text(self, instruction: str) -> str:
        """Send one instruction, return the model's raw text (may include prose or code fences)."""
        ...

    def close(self) -> None:
        """Release network resources. Called once at application shutdown."""
        ...
