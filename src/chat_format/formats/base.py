"""Abstract base class for output format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from chat_format.core.formatter import FormattedMessage
from chat_format.formatting.ir import OutputNode


class OutputHandler(ABC):
    """Abstract base class for output format handlers.

    Each handler paints a sequence of output nodes in one concrete
    format and can write the result to a file.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the format name used on the command line (e.g., 'html')."""
        ...

    @property
    @abstractmethod
    def extension(self) -> str:
        """Return the file extension for this format (e.g., '.html')."""
        ...

    @abstractmethod
    def render(self, nodes: list[OutputNode]) -> str:
        """Render output nodes to a string.

        Args:
            nodes: Output nodes in display order

        Returns:
            The rendered content
        """
        ...

    def message_nodes(self, message: FormattedMessage) -> list[OutputNode]:
        """Nodes shown for one message: its content, then its citations."""
        return message.nodes + message.citation_nodes()

    def render_messages(self, messages: list[FormattedMessage]) -> str:
        """Render several formatted chat messages.

        Default implementation renders each message on its own and
        separates them with a blank line. Override in handlers whose
        output must stay a single document.
        """
        rendered: list[str] = []
        for message in messages:
            nodes = self.message_nodes(message)
            if nodes:
                rendered.append(self.render(nodes))
        return "\n\n".join(rendered)

    def write(self, nodes: list[OutputNode], path: Path) -> None:
        """Render output nodes and write them to a file.

        Args:
            nodes: Output nodes in display order
            path: Path to write the rendered content
        """
        path.write_text(self.render(nodes), encoding="utf-8")
