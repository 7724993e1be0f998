"""Loading graph documents from TOML files."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from ._errors import GraphDocumentError
from ._graph import DirectedGraph

logger = logging.getLogger(__name__)


class GraphDocument(BaseModel):
    """A graph described in a TOML document.

    Example document::

        nodes = ["a", "b", "c"]

        [edges]
        a = ["b"]
        b = ["c"]

        [hints]
        c = ["a"]

    ``edges`` holds the dependency graph (``a = ["b"]`` means "a depends on
    b"). ``hints`` holds an optional weak ordering that may contain cycles.
    When ``nodes`` is omitted, every name mentioned in ``edges`` or ``hints``
    is a node.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    nodes: list[str] | None = None
    edges: dict[str, list[str]] = {}
    hints: dict[str, list[str]] = {}

    def node_names(self) -> tuple[str, ...]:
        """The declared nodes, or every mentioned name in order of appearance."""
        if self.nodes is not None:
            return tuple(dict.fromkeys(self.nodes))
        mentioned: dict[str, None] = {}
        for adjacency in (self.edges, self.hints):
            for node, targets in adjacency.items():
                mentioned[node] = None
                mentioned.update(dict.fromkeys(targets))
        return tuple(mentioned)

    @property
    def has_hints(self) -> bool:
        return bool(self.hints)

    def to_graph(self, *, strict: bool = False) -> DirectedGraph[str]:
        """Build the dependency graph."""
        return DirectedGraph.from_mapping(self.edges, self.node_names(), strict=strict)

    def to_hint_graph(self, *, strict: bool = False) -> DirectedGraph[str]:
        """Build the weak ordering graph over the same node set."""
        return DirectedGraph.from_mapping(self.hints, self.node_names(), strict=strict)


def toml_to_graph_document(toml_contents: dict[str, object]) -> GraphDocument:
    """Validate parsed TOML contents as a graph document.

    Raises:
        GraphDocumentError: If the contents do not match the document schema.

    """
    try:
        return GraphDocument.model_validate(toml_contents)
    except ValidationError as e:
        msg = f"Invalid graph document: {e}"
        raise GraphDocumentError(msg) from e


def load_graph_document(input_path: Path | str) -> GraphDocument:
    """Load a graph document from a TOML file.

    Raises:
        GraphDocumentError: If the file is missing or unreadable, is not
            valid UTF-8 TOML, or does not match the document schema.

    """
    input_path = Path(input_path)
    try:
        with input_path.open("rb") as f:
            toml_contents = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Graph file not found: {input_path}"
        raise GraphDocumentError(msg) from e
    except OSError as e:
        msg = f"Cannot read graph file {input_path}: {e.strerror or e}"
        raise GraphDocumentError(msg) from e
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        msg = f"Invalid TOML in {input_path}: {e}"
        raise GraphDocumentError(msg) from e

    document = toml_to_graph_document(toml_contents)
    logger.debug(f"Loaded graph with {len(document.node_names())} nodes from {input_path}")
    return document
