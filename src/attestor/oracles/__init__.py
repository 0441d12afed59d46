"""External oracles: knowledge graph, source host, text completion."""

from attestor.oracles.completion import CliCompleter, LiteLLMCompleter
from attestor.oracles.errors import OracleError, OracleUnavailableError
from attestor.oracles.factory import (
    build_completer,
    build_knowledge_graph,
    build_source_host,
)
from attestor.oracles.knowledge_graph import BipKnowledgeGraph
from attestor.oracles.protocols import (
    FileMetadata,
    KnowledgeGraph,
    SourceHost,
    TextCompleter,
)
from attestor.oracles.source_host import GhCliSourceHost, GitHubApiSourceHost

__all__ = [
    "BipKnowledgeGraph",
    "CliCompleter",
    "FileMetadata",
    "GhCliSourceHost",
    "GitHubApiSourceHost",
    "KnowledgeGraph",
    "LiteLLMCompleter",
    "OracleError",
    "OracleUnavailableError",
    "SourceHost",
    "TextCompleter",
    "build_completer",
    "build_knowledge_graph",
    "build_source_host",
]
